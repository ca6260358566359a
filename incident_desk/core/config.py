# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "incident-desk")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    STATIC_DIR: str = os.getenv("STATIC_DIR", str(_PROJECT_ROOT / "static"))
    SEED_DEMO_INCIDENTS: bool = (
        os.getenv("SEED_DEMO_INCIDENTS", "true").lower() == "true"
    )


settings = Settings()
