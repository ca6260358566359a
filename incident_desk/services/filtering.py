# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Incident filtering — pure computation, no side effects.
Operates on snapshots returned by the store; never touches the store itself.
"""

from typing import Sequence

from incident_desk.models.domain import Incident


def _normalize(value: str | None) -> str:
    return (value or "").strip().lower()


def matches_query(incident: Incident, query: str) -> bool:
    """True if `query` (already lower-cased) occurs in title, owner, a tag or an IOC."""
    haystacks = [incident.title, incident.owner, *incident.tags, *incident.iocs]
    return any(query in h.lower() for h in haystacks)


def filter_incidents(
    items: Sequence[Incident],
    severity: str | None = "",
    status: str | None = "",
    query: str | None = "",
) -> Sequence[Incident]:
    """
    AND together the supplied criteria, preserving input order.
    Severity and status are case-insensitive exact matches; query is a
    case-insensitive substring match. With no criteria the input is
    returned as-is.
    """
    severity = _normalize(severity)
    status = _normalize(status)
    query = _normalize(query)

    if not (severity or status or query):
        return items

    return [
        incident
        for incident in items
        if (not severity or incident.severity.lower() == severity)
        and (not status or incident.status.lower() == status)
        and (not query or matches_query(incident, query))
    ]
