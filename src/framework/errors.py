"""
Error catalogs for the web service endpoints.

Each endpoint owns a static catalog mapping short error codes (e.g. "_201")
to a structured error descriptor. Descriptors are immutable; a fresh copy
carrying debug information is created every time a failure occurs.
"""

from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class ErrorLevel(str, Enum):
    """Severity of a catalog error."""
    WARNING = "Warning"   # client input class
    ERROR = "Error"       # server / store class


class UnknownErrorCode(KeyError):
    """Raised when a code is not part of a catalog."""


class ErrorDescriptor(BaseModel):
    """Structured error returned to the caller alongside the HTTP status."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique error identifier, e.g. WS-ONTOLOGY-DELETE-201")
    webservice: str = Field(..., description="Path of the service that owns the error")
    name: str = Field(..., description="Short human readable name")
    description: str = Field(..., description="Longer human readable description")
    debug_info: str = Field(default="", description="Occurrence specific debugging context")
    level: ErrorLevel = Field(default=ErrorLevel.WARNING, description="Severity of the error")


class ErrorCatalog:
    """Read-only table of the errors a service can return."""

    def __init__(self, webservice: str, entries: Dict[str, Dict[str, str]]):
        """
        Args:
            webservice: Service path shared by all the entries (e.g. "/ws/ontology/delete/")
            entries: code -> {"id", "name", "description", "level"}
        """
        self.webservice = webservice
        self._entries: Dict[str, ErrorDescriptor] = {
            code: ErrorDescriptor(
                id=entry["id"],
                webservice=webservice,
                name=entry["name"],
                description=entry["description"],
                level=ErrorLevel(entry.get("level", ErrorLevel.WARNING.value)),
            )
            for code, entry in entries.items()
        }

    def __contains__(self, code: str) -> bool:
        return code in self._entries

    def lookup(self, code: str) -> ErrorDescriptor:
        """Get the catalog entry for a code."""
        try:
            return self._entries[code]
        except KeyError:
            raise UnknownErrorCode(f"Unknown error code {code} for {self.webservice}") from None

    def instantiate(self, code: str, debug_info: str = "") -> ErrorDescriptor:
        """Materialize one occurrence of an error with its debug context."""
        return self.lookup(code).model_copy(update={"debug_info": debug_info})
