"""
Framework shared by the web service endpoints.

Public Interface:
- ServiceConfig: Environment backed configuration
- ErrorCatalog / ErrorDescriptor: Per-service static error tables
- ResponseState: Per-request status and error holder
- Identity: Requester / registered identity pair
"""

from .config import ServiceConfig, ConfigError
from .errors import ErrorCatalog, ErrorDescriptor, ErrorLevel, UnknownErrorCode
from .identity import Identity
from .response import ResponseState

__all__ = [
    "ServiceConfig",
    "Identity",
    "ConfigError",
    "ErrorCatalog",
    "ErrorDescriptor",
    "ErrorLevel",
    "UnknownErrorCode",
    "ResponseState",
]
