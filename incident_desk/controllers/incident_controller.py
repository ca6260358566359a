# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Incident endpoints — list, create, get, update, notes.
Thin HTTP layer — delegates ALL logic to IncidentService.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from incident_desk.core.dependencies import get_incident_service
from incident_desk.core.errors import IncidentNotFoundError, InvalidInputError
from incident_desk.models.domain import Incident
from incident_desk.schemas import (
    ErrorResponse,
    IncidentCreateRequest,
    IncidentListResponse,
    IncidentUpdateRequest,
    NoteCreateRequest,
)
from incident_desk.services.incident_service import IncidentService

router = APIRouter(
    prefix="/api",
    tags=["Incidents"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.get("/incidents", response_model=IncidentListResponse)
def list_incidents(
    severity: Optional[str] = Query(default=None, description="Exact match, case-insensitive"),
    status: Optional[str] = Query(default=None, description="Exact match, case-insensitive"),
    q: Optional[str] = Query(default=None, description="Substring of title, owner, tags or IOCs"),
    service: IncidentService = Depends(get_incident_service),
):
    """List incidents newest first, optionally filtered."""
    return {"items": service.list_incidents(severity=severity, status=status, query=q)}


@router.post("/incidents", status_code=201, response_model=Incident)
def create_incident(
    payload: IncidentCreateRequest,
    service: IncidentService = Depends(get_incident_service),
):
    """Open a new incident."""
    try:
        return service.create_incident(
            title=payload.title,
            severity=payload.severity,
            status=payload.status,
            owner=payload.owner,
            tags=payload.tags,
            iocs=payload.iocs,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/incidents/{incident_id}", response_model=Incident)
def get_incident(
    incident_id: str,
    service: IncidentService = Depends(get_incident_service),
):
    """Get a single incident with its notes."""
    try:
        return service.get_incident(incident_id)
    except IncidentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/incidents/{incident_id}", response_model=Incident)
def update_incident(
    incident_id: str,
    payload: IncidentUpdateRequest,
    service: IncidentService = Depends(get_incident_service),
):
    """Partially update severity, status and owner."""
    try:
        return service.update_incident(
            incident_id,
            severity=payload.severity,
            status=payload.status,
            owner=payload.owner,
        )
    except IncidentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/incidents/{incident_id}/notes", response_model=Incident)
def add_note(
    incident_id: str,
    payload: NoteCreateRequest,
    service: IncidentService = Depends(get_incident_service),
):
    """Append an investigation note; the newest note is listed first."""
    try:
        return service.add_note(incident_id, body=payload.body, author=payload.author)
    except IncidentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
