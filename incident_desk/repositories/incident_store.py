# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Incident data access.
Authoritative in-memory store of incidents, guarded by one readers/writer lock.

The lock covers the keyed collection, the display order and the id counter
as a single unit. Every incident handed out is a deep copy, so callers can
never mutate stored state without going through a write operation.
"""

from datetime import datetime, timezone
from typing import Iterable, Optional

from incident_desk.core.errors import IncidentNotFoundError, InvalidInputError
from incident_desk.core.locks import ReadWriteLock
from incident_desk.models.domain import Incident, Note

DEFAULT_SEVERITY = "Medium"
DEFAULT_STATUS = "New"
DEFAULT_OWNER = "Unassigned"
DEFAULT_AUTHOR = "Analyst"


def format_sequence_id(prefix: str, value: int) -> str:
    """Zero-pad to four digits; wider numbers are kept as-is."""
    return f"{prefix}-{value:04d}"


def _fallback(value: Optional[str], default: str) -> str:
    if value is None or not value.strip():
        return default
    return value


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def sanitize_values(values: Optional[Iterable[str]]) -> list[str]:
    """Trim each entry and drop the empty ones, keeping order."""
    if not values:
        return []
    return [v.strip() for v in values if v.strip()]


class IncidentStore:
    """In-memory incident storage, safe for concurrent callers."""

    def __init__(self, counter_start: int = 1000) -> None:
        self._lock = ReadWriteLock()
        self._incidents: dict[str, Incident] = {}
        self._order: list[str] = []  # newest first
        self._counter = counter_start

    # ── Read ──

    def list(self) -> list[Incident]:
        """Point-in-time snapshot of every incident, newest first."""
        with self._lock.read_locked():
            return [
                self._incidents[incident_id].model_copy(deep=True)
                for incident_id in self._order
                if incident_id in self._incidents
            ]

    def get(self, incident_id: str) -> Optional[Incident]:
        with self._lock.read_locked():
            incident = self._incidents.get(incident_id)
            return incident.model_copy(deep=True) if incident is not None else None

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._incidents)

    # ── Write ──

    def create(
        self,
        title: str,
        severity: Optional[str] = "",
        status: Optional[str] = "",
        owner: Optional[str] = "",
        tags: Optional[Iterable[str]] = None,
        iocs: Optional[Iterable[str]] = None,
    ) -> Incident:
        """Store a new incident and return a copy. Never fails."""
        clean_tags = sanitize_values(tags)
        clean_iocs = sanitize_values(iocs)
        with self._lock.write_locked():
            self._counter += 1
            incident_id = format_sequence_id("INC", self._counter)
            now = datetime.now(timezone.utc)
            incident = Incident(
                id=incident_id,
                title=title,
                severity=_fallback(severity, DEFAULT_SEVERITY),
                status=_fallback(status, DEFAULT_STATUS),
                owner=_fallback(owner, DEFAULT_OWNER),
                tags=clean_tags,
                iocs=clean_iocs,
                notes=[],
                created_at=now,
                updated_at=now,
            )
            self._incidents[incident_id] = incident
            self._order.insert(0, incident_id)
            return incident.model_copy(deep=True)

    def update(
        self,
        incident_id: str,
        severity: Optional[str] = "",
        status: Optional[str] = "",
        owner: Optional[str] = "",
    ) -> Incident:
        """Apply the non-blank triage fields. Raises IncidentNotFoundError."""
        with self._lock.write_locked():
            incident = self._incidents.get(incident_id)
            if incident is None:
                raise IncidentNotFoundError(incident_id)

            if not _is_blank(severity):
                incident.severity = severity
            if not _is_blank(status):
                incident.status = status
            if not _is_blank(owner):
                incident.owner = owner
            incident.updated_at = datetime.now(timezone.utc)
            return incident.model_copy(deep=True)

    def add_note(
        self,
        incident_id: str,
        body: Optional[str],
        author: Optional[str] = "",
    ) -> Incident:
        """
        Prepend a note to the incident.
        Raises IncidentNotFoundError, or InvalidInputError for a blank body.
        """
        with self._lock.write_locked():
            incident = self._incidents.get(incident_id)
            if incident is None:
                raise IncidentNotFoundError(incident_id)
            if _is_blank(body):
                raise InvalidInputError("note body required")

            now = datetime.now(timezone.utc)
            note = Note(
                # Numbered per incident; notes are never deleted.
                id=format_sequence_id("NOTE", len(incident.notes) + 1),
                body=body,
                author=_fallback(author, DEFAULT_AUTHOR),
                created_at=now,
            )
            incident.notes.insert(0, note)
            incident.updated_at = now
            return incident.model_copy(deep=True)
