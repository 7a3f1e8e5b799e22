"""
RDF backed permission store.

Access records are kept as wsf:Access resources in an rdflib graph:

    _:access a wsf:Access ;
        wsf:registeredIP "192.168.0.1::bob" ;
        wsf:datasetAccess <http://example.org/onto> ;
        wsf:delete true .
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from rdflib import BNode, Graph, Literal, Namespace, RDF, URIRef
from rdflib.namespace import XSD

from .domain import ACTIONS, AUTH_VALIDATOR_ERRORS, AccessRecord, PermissionCheck

logger = logging.getLogger(__name__)

WSF = Namespace("http://purl.org/ontology/wsf#")


class PermissionStore:
    """In-memory store of the access records of the system."""

    def __init__(self, graph: Optional[Graph] = None):
        self.graph = graph if graph is not None else Graph()
        self.graph.bind("wsf", WSF)
        self.open_sessions = 0
        self._sessions_lock = threading.Lock()

    def grant(self, identity: str, scope_uri: str, actions) -> AccessRecord:
        """Give an identity actions on a scope, replacing any previous record for the pair."""
        actions = frozenset(actions)
        unknown = actions - ACTIONS
        if unknown:
            raise ValueError(f"Unknown actions: {sorted(unknown)}")

        self.revoke(identity, scope_uri)

        node = BNode()
        self.graph.add((node, RDF.type, WSF.Access))
        self.graph.add((node, WSF.registeredIP, Literal(identity)))
        self.graph.add((node, WSF.datasetAccess, URIRef(scope_uri)))
        for action in sorted(ACTIONS):
            self.graph.add((node, WSF[action], Literal(action in actions, datatype=XSD.boolean)))

        return AccessRecord(identity=identity, scope_uri=scope_uri, actions=actions)

    def revoke(self, identity: str, scope_uri: str) -> bool:
        """Remove the access record of an identity on a scope."""
        node = self._find_access(identity, scope_uri)
        if node is None:
            return False
        self.graph.remove((node, None, None))
        return True

    def revoke_scope(self, scope_uri: str) -> int:
        """Remove every access record defined on a scope.

        Returns:
            Number of removed records
        """
        nodes = list(self.graph.subjects(WSF.datasetAccess, URIRef(scope_uri)))
        for node in nodes:
            self.graph.remove((node, None, None))
        return len(nodes)

    def records(self) -> List[AccessRecord]:
        records = []
        for node in self.graph.subjects(RDF.type, WSF.Access):
            records.append(self._to_record(node))
        return records

    def check(self, identity: str, scope_uri: str, action: str = "delete") -> PermissionCheck:
        """Check that an identity may perform an action on a scope."""
        if not identity:
            return self._denied(401, "Unauthorized", "_200", f"scope: {scope_uri}")

        if action not in ACTIONS:
            return self._denied(400, "Bad Request", "_201", f"action: {action}")

        node = self._find_access(identity, scope_uri)
        if node is None:
            return self._denied(403, "Forbidden", "_300", f"identity: {identity}; scope: {scope_uri}")

        if action not in self._to_record(node).actions:
            return self._denied(403, "Forbidden", "_301",
                                f"identity: {identity}; scope: {scope_uri}; action: {action}")

        return PermissionCheck.granted()

    @contextmanager
    def session(self) -> Iterator["PermissionSession"]:
        """Open a session on the store; it is always closed on exit."""
        session = PermissionSession(self)
        with self._sessions_lock:
            self.open_sessions += 1
        try:
            yield session
        finally:
            try:
                session.close()
            except Exception as e:
                # cleanup is best effort
                logger.debug(f"Ignoring permission session cleanup failure: {e}")

    def _release(self, session: "PermissionSession") -> None:
        with self._sessions_lock:
            self.open_sessions -= 1

    def _find_access(self, identity: str, scope_uri: str) -> Optional[BNode]:
        for node in self.graph.subjects(WSF.registeredIP, Literal(identity)):
            if (node, WSF.datasetAccess, URIRef(scope_uri)) in self.graph:
                return node
        return None

    def _to_record(self, node) -> AccessRecord:
        identity = str(self.graph.value(node, WSF.registeredIP))
        scope = str(self.graph.value(node, WSF.datasetAccess))
        actions = frozenset(
            action for action in ACTIONS
            if (node, WSF[action], Literal(True)) in self.graph
        )
        return AccessRecord(identity=identity, scope_uri=scope, actions=actions)

    def _denied(self, status: int, message: str, code: str, debug_info: str) -> PermissionCheck:
        error = AUTH_VALIDATOR_ERRORS.instantiate(code, debug_info)
        return PermissionCheck(
            status=status,
            status_message=message,
            status_message_ext=error.name,
            error=error,
        )


class PermissionSession:
    """Handle used to run checks against the permission store."""

    def __init__(self, store: PermissionStore):
        self.store = store
        self.closed = False

    def check(self, identity: str, scope_uri: str, action: str = "delete") -> PermissionCheck:
        if self.closed:
            raise RuntimeError("Permission session is closed")
        return self.store.check(identity, scope_uri, action)

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            self.store._release(self)
