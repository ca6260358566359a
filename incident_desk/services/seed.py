# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Demo seed data so the UI has something to show on first start.
"""

from typing import Any

from incident_desk.core.logging import get_logger
from incident_desk.repositories.incident_store import IncidentStore

logger = get_logger(__name__)

DEMO_INCIDENTS: tuple[dict[str, Any], ...] = (
    {
        "title": "Suspicious OAuth consent grant",
        "severity": "High",
        "status": "Investigating",
        "owner": "SOC Tier 2",
        "tags": ["identity", "cloud"],
        "iocs": ["a1f4b9f", "login.live.com"],
    },
    {
        "title": "Unusual lateral movement across finance segment",
        "severity": "Critical",
        "status": "Contained",
        "owner": "IR Lead",
        "tags": ["lateral", "endpoint"],
        "iocs": ["10.22.18.9", "svc_backup"],
    },
    {
        "title": "Phishing campaign targeting HR",
        "severity": "Medium",
        "status": "New",
        "owner": "SOC Tier 1",
        "tags": ["phishing", "email"],
        "iocs": ["payroll-update.com"],
    },
)


def initialize_store(seed: bool = True) -> IncidentStore:
    """Build a fresh store, seeded through the normal create path."""
    store = IncidentStore()
    if seed:
        for incident in DEMO_INCIDENTS:
            store.create(**incident)
        logger.info("Seeded %d demo incidents", len(DEMO_INCIDENTS))
    return store
