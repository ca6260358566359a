# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Note(_CamelModel):
    """An append-only investigation comment attached to an incident."""
    id: str = Field(..., description="NOTE-%04d, unique within its incident")
    body: str
    author: str
    created_at: datetime


class Incident(_CamelModel):
    """A tracked security event with mutable triage fields."""
    id: str = Field(..., description="INC-%04d, unique for the store's lifetime")
    title: str
    severity: str
    status: str
    owner: str
    tags: list[str] = Field(default_factory=list)
    iocs: list[str] = Field(default_factory=list, description="Indicators of compromise")
    notes: list[Note] = Field(default_factory=list, description="Newest first")
    created_at: datetime
    updated_at: datetime
