"""
Domain models for the permission module.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from framework.errors import ErrorCatalog, ErrorDescriptor, ErrorLevel


ACTIONS = frozenset({"create", "read", "update", "delete"})


@dataclass(frozen=True)
class AccessRecord:
    """Grants an identity a set of actions on one scope (a dataset, an ontology or a registry)."""

    identity: str
    scope_uri: str
    actions: FrozenSet[str] = field(default_factory=frozenset)


@dataclass
class PermissionCheck:
    """Outcome of a permission check, in the same shape as a ResponseState."""

    status: int
    status_message: str
    status_message_ext: str = ""
    error: Optional[ErrorDescriptor] = None

    @property
    def ok(self) -> bool:
        return self.status == 200

    @classmethod
    def granted(cls) -> "PermissionCheck":
        return cls(status=200, status_message="OK")


AUTH_VALIDATOR_ERRORS = ErrorCatalog("/ws/auth/validator/", {
    "_200": {
        "id": "WS-AUTH-VALIDATOR-200",
        "level": ErrorLevel.WARNING.value,
        "name": "No identity defined for this request",
        "description": "The identity of the requester is needed to validate the request",
    },
    "_201": {
        "id": "WS-AUTH-VALIDATOR-201",
        "level": ErrorLevel.WARNING.value,
        "name": "Unknown action",
        "description": "The action being validated is not one of create, read, update or delete",
    },
    "_300": {
        "id": "WS-AUTH-VALIDATOR-300",
        "level": ErrorLevel.WARNING.value,
        "name": "No access defined",
        "description": "No access is defined for this identity on the target scope",
    },
    "_301": {
        "id": "WS-AUTH-VALIDATOR-301",
        "level": ErrorLevel.WARNING.value,
        "name": "Action not permitted",
        "description": "The identity has access to the target scope but is not permitted to perform this action",
    },
})
