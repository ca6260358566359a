# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Incident triage — business logic on top of the store.
Caller-level validation, metrics and logging live here; the store stays a
pure data structure.
"""

from typing import Optional, Sequence

from incident_desk.core.errors import IncidentNotFoundError, InvalidInputError
from incident_desk.core.logging import get_logger
from incident_desk.metrics import (
    INCIDENTS_CREATED,
    INCIDENT_UPDATES,
    INCIDENTS_TRACKED,
    NOTES_ADDED,
)
from incident_desk.models.domain import Incident
from incident_desk.repositories.incident_store import IncidentStore
from incident_desk.services.filtering import filter_incidents

logger = get_logger(__name__)


class IncidentService:
    """Business logic for incident tracking."""

    def __init__(self, store: IncidentStore) -> None:
        self._store = store

    @property
    def store(self) -> IncidentStore:
        return self._store

    def seed_gauges(self) -> None:
        INCIDENTS_TRACKED.set(self._store.count())

    # ── Queries ──

    def list_incidents(
        self,
        severity: Optional[str] = None,
        status: Optional[str] = None,
        query: Optional[str] = None,
    ) -> Sequence[Incident]:
        return filter_incidents(self._store.list(), severity, status, query)

    def get_incident(self, incident_id: str) -> Incident:
        """Raises IncidentNotFoundError if absent."""
        incident = self._store.get(incident_id)
        if incident is None:
            raise IncidentNotFoundError(incident_id)
        return incident

    # ── Commands ──

    def create_incident(
        self,
        title: Optional[str],
        severity: Optional[str] = None,
        status: Optional[str] = None,
        owner: Optional[str] = None,
        tags: Optional[list[str]] = None,
        iocs: Optional[list[str]] = None,
    ) -> Incident:
        """Create an incident. Raises InvalidInputError on a blank title."""
        if not title or not title.strip():
            raise InvalidInputError("title is required")

        incident = self._store.create(
            title=title,
            severity=severity,
            status=status,
            owner=owner,
            tags=tags,
            iocs=iocs,
        )
        INCIDENTS_CREATED.inc()
        INCIDENTS_TRACKED.inc()
        logger.info(
            "Incident created id=%s severity=%s owner=%s",
            incident.id, incident.severity, incident.owner,
        )
        return incident

    def update_incident(
        self,
        incident_id: str,
        severity: Optional[str] = None,
        status: Optional[str] = None,
        owner: Optional[str] = None,
    ) -> Incident:
        """Partially update triage fields. Raises IncidentNotFoundError."""
        incident = self._store.update(
            incident_id, severity=severity, status=status, owner=owner,
        )
        INCIDENT_UPDATES.inc()
        logger.info(
            "Incident updated id=%s severity=%s status=%s owner=%s",
            incident.id, incident.severity, incident.status, incident.owner,
        )
        return incident

    def add_note(
        self,
        incident_id: str,
        body: Optional[str],
        author: Optional[str] = None,
    ) -> Incident:
        """Raises IncidentNotFoundError or InvalidInputError."""
        incident = self._store.add_note(incident_id, body=body, author=author)
        NOTES_ADDED.inc()
        note = incident.notes[0]
        logger.info(
            "Note added incident=%s note=%s author=%s",
            incident.id, note.id, note.author,
        )
        return incident
