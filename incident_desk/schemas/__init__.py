# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
Request bodies are strict: unknown fields are rejected.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from incident_desk.models.domain import Incident


class _StrictRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")


class IncidentCreateRequest(_StrictRequest):
    title: Optional[str] = Field(default=None, description="Required, non-blank")
    severity: Optional[str] = Field(default=None, description="Defaults to Medium")
    status: Optional[str] = Field(default=None, description="Defaults to New")
    owner: Optional[str] = Field(default=None, description="Defaults to Unassigned")
    tags: Optional[list[str]] = None
    iocs: Optional[list[str]] = None


class IncidentUpdateRequest(_StrictRequest):
    """Partial update for PUT /api/incidents/{id}; blank fields are ignored."""
    severity: Optional[str] = None
    status: Optional[str] = None
    owner: Optional[str] = None


class NoteCreateRequest(_StrictRequest):
    body: Optional[str] = Field(default=None, description="Required, non-blank")
    author: Optional[str] = Field(default=None, description="Defaults to Analyst")


class IncidentListResponse(BaseModel):
    items: list[Incident]


class ErrorResponse(BaseModel):
    detail: str
    request_id: Optional[str] = None
