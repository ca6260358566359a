# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection: hand out the instances owned by the app.
The entry point builds the store and service and pins them on app.state.
"""

from fastapi import Request

from incident_desk.repositories.incident_store import IncidentStore
from incident_desk.services.incident_service import IncidentService


def get_incident_service(request: Request) -> IncidentService:
    return request.app.state.incident_service


def get_incident_store(request: Request) -> IncidentStore:
    return request.app.state.incident_service.store
