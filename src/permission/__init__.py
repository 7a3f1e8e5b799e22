"""
Permission Module

Stores which identities may perform which actions on which scopes, and
validates requests against it.

Public Interface:
- PermissionStore: RDF backed store of access records
- PermissionGate: Two-tier (registry, then resource) authorization
"""

from .domain import AccessRecord, PermissionCheck
from .gate import PermissionGate
from .store import PermissionStore

__all__ = ["PermissionStore", "PermissionGate", "PermissionCheck", "AccessRecord"]
