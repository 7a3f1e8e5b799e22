"""
Per-request response state shared by every stage of a web service call.

The state holds the HTTP-like status of the call and, once something went
wrong, the structured error describing it. It does not protect itself against
being overwritten: callers check is_ok() before running the next stage.
"""

from typing import Any, Dict, Optional

from .errors import ErrorCatalog, ErrorDescriptor


class ResponseState:
    """Mutable status/error holder for one request."""

    def __init__(self):
        self.status: int = 200
        self.status_message: str = "OK"
        self.status_message_ext: str = ""
        self.error: Optional[ErrorDescriptor] = None

    def is_ok(self) -> bool:
        return self.status == 200

    def set_status(self, status: int, message: str, extension: str = "") -> None:
        self.status = status
        self.status_message = message
        self.status_message_ext = extension

    def set_error(self, descriptor: Optional[ErrorDescriptor]) -> None:
        self.error = descriptor

    def return_error(self, status: int, message: str, catalog: ErrorCatalog,
                     code: str, debug_info: str = "") -> ErrorDescriptor:
        """Fail the request with a catalog error.

        The status message extension is the catalog entry's name.

        Returns:
            The error instance that was attached to the state
        """
        descriptor = catalog.instantiate(code, debug_info)
        self.set_status(status, message, descriptor.name)
        self.set_error(descriptor)
        return descriptor

    def propagate(self, other) -> None:
        """Copy another service's outcome verbatim into this state.

        `other` is anything shaped like a ResponseState (status, status_message,
        status_message_ext, error), e.g. a permission check.
        """
        self.set_status(other.status, other.status_message, other.status_message_ext)
        self.set_error(other.error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "status_message": self.status_message,
            "status_message_ext": self.status_message_ext,
            "error": self.error.model_dump(mode="json") if self.error else None,
        }

    def __repr__(self) -> str:
        error_id = self.error.id if self.error else None
        return f"ResponseState(status={self.status}, message={self.status_message!r}, error={error_id})"
