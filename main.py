# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Incident Desk
=============
In-memory tracker for security-incident tickets: create, list, filter,
triage (severity / status / owner) and append investigation notes.
Serves a small JSON API under /api and the browser UI from ./static.

Port: 8080 (PORT env var)
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from incident_desk.controllers import incident_controller, system_controller
from incident_desk.core.config import settings
from incident_desk.core.logging import get_logger
from incident_desk.middleware import MetricsMiddleware, RequestIDMiddleware
from incident_desk.repositories.incident_store import IncidentStore
from incident_desk.services.incident_service import IncidentService
from incident_desk.services.seed import initialize_store

logger = get_logger(__name__)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    service: IncidentService = application.state.incident_service
    service.seed_gauges()
    logger.info(
        "%s %s starting, %d incidents in memory",
        settings.SERVICE_NAME, settings.SERVICE_VERSION, service.store.count(),
    )
    yield
    logger.info(
        "Shutting down, %d incidents discarded", service.store.count(),
    )


# ── App factory ───────────────────────────────────────────────────────────
def create_app(store: Optional[IncidentStore] = None) -> FastAPI:
    """Wire the HTTP layer around a store; a seeded one is built if none is given."""
    if store is None:
        store = initialize_store(seed=settings.SEED_DEMO_INCIDENTS)

    application = FastAPI(
        title="Incident Desk",
        description="Tracks security incidents, their triage state and investigation notes.",
        version=settings.SERVICE_VERSION,
        lifespan=lifespan,
    )
    application.state.incident_service = IncidentService(store)

    application.add_middleware(MetricsMiddleware)
    application.add_middleware(RequestIDMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.exception_handler(RequestValidationError)
    async def invalid_payload_handler(request: Request, exc: RequestValidationError):
        req_id = getattr(request.state, "request_id", None)
        logger.info("Rejected payload on %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content={"detail": "invalid payload", "request_id": req_id},
        )

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        req_id = getattr(request.state, "request_id", None)
        logger.exception("Unhandled exception", extra={"request_id": req_id})
        return JSONResponse(
            status_code=500,
            content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
        )

    application.include_router(system_controller.router)
    application.include_router(incident_controller.router)

    # Static UI last so every API route wins over the catch-all mount.
    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        application.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found, UI disabled", static_dir)

    return application


app = create_app()


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn

    logger.info("Listening on http://localhost:%d", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
