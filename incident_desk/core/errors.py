# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain errors raised by the store and service layer.
Controllers translate them: IncidentNotFoundError -> 404, InvalidInputError -> 400.
"""


class IncidentNotFoundError(KeyError):
    """No incident exists with the requested id."""

    def __init__(self, incident_id: str) -> None:
        super().__init__(incident_id)
        self.incident_id = incident_id

    def __str__(self) -> str:
        return f"Incident '{self.incident_id}' not found"


class InvalidInputError(ValueError):
    """Payload failed a semantic check (e.g. a required field is blank)."""
