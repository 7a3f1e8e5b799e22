"""
Two-tier permission gate used by the web services before mutating anything.

An identity is authorized on a resource if it has the action on the registry
scope (the collection of all such resources) or, failing that, on the resource
itself. When both checks fail the resource check is reported since it is the
one closest to what the caller asked for.
"""

import logging
from typing import Optional

from framework.identity import Identity
from .domain import PermissionCheck
from .store import PermissionStore

logger = logging.getLogger(__name__)


class PermissionGate:
    """Resolves whether identities may mutate a target resource scope."""

    def __init__(self, store: PermissionStore, action: str = "delete"):
        self.store = store
        self.action = action

    def authorize(self, identity: str, resource_uri: str,
                  registry_uri: Optional[str] = None) -> PermissionCheck:
        """Authorize one identity on a resource.

        Args:
            identity: Identity to validate
            resource_uri: Scope of the resource itself (may be empty)
            registry_uri: Collection level scope checked first; None checks the resource only

        Returns:
            The granted check, or the failing check to surface to the caller
        """
        with self.store.session() as session:
            if registry_uri:
                registry_check = session.check(identity, registry_uri, self.action)
                if registry_check.ok:
                    return registry_check

                if not resource_uri:
                    logger.warning(f"{identity} denied on {registry_uri} and no resource scope to fall back to")
                    return registry_check

            resource_check = session.check(identity, resource_uri, self.action)
            if not resource_check.ok:
                logger.warning(f"{identity} denied on {resource_uri} "
                               f"(status {resource_check.status}, {resource_check.status_message_ext})")
            return resource_check

    def authorize_identities(self, identity: Identity, resource_uri: str,
                             registry_uri: Optional[str] = None) -> PermissionCheck:
        """Authorize the requester and, when the call is delegated, the registered identity."""
        check = self.authorize(identity.requester, resource_uri, registry_uri)
        if not check.ok:
            return check

        if identity.is_delegated:
            return self.authorize(identity.registered, resource_uri, registry_uri)

        return check
