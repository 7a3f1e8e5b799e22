"""
Destructive operations against the ontology store.

Entity removals (class, property, named individual) mark the owning ontology
as modified once the removal succeeded. Deleting a whole ontology drops it
from the store, then removes its wsf:holdOntology marker from the datasets
registry with a separate statement on the system triple store. The two are
not atomic: a failing marker removal is logged and ignored.
"""

import logging
from typing import Optional

from rdflib import Dataset, Namespace, URIRef

from framework.errors import ErrorDescriptor
from ontology.store import OntologyHandle, OntologyStoreSession
from .domain import ResourceKind, ResourceTarget
from .errors import ONTOLOGY_DELETE_ERRORS

logger = logging.getLogger(__name__)

WSF = Namespace("http://purl.org/ontology/wsf#")
ONTOLOGY_MODIFIED = str(WSF.ontologyModified)

# kind -> (handle method, error code)
ENTITY_REMOVALS = {
    ResourceKind.CLASS: ("remove_class", "_301"),
    ResourceKind.PROPERTY: ("remove_property", "_302"),
    ResourceKind.NAMED_INDIVIDUAL: ("remove_named_individual", "_303"),
}


class OntologyResourceDeleter:
    """Deletes one resource from the ontology store."""

    def __init__(self, triple_store: Dataset, datasets_registry_uri: str):
        """
        Args:
            triple_store: System triple store holding the datasets registry graph
            datasets_registry_uri: Graph of the datasets registry
        """
        self.triple_store = triple_store
        self.datasets_registry_uri = datasets_registry_uri

    def delete(self, target: ResourceTarget, session: OntologyStoreSession) -> Optional[ErrorDescriptor]:
        """Delete a resource.

        Returns:
            None on success, otherwise the error to report (nothing was marked modified)
        """
        resolved = session.resolve(target.ontology_uri)
        if not resolved.ok:
            logger.error(f"Can't load ontology {target.ontology_uri}: {resolved.error}")
            return ONTOLOGY_DELETE_ERRORS.instantiate("_300", resolved.error)

        if target.kind is ResourceKind.ONTOLOGY:
            return self._delete_ontology(resolved.handle)

        if target.kind in ENTITY_REMOVALS:
            return self._delete_entity(target, resolved.handle)

        raise ValueError(f"Unsupported resource kind: {target.kind}")

    def _delete_entity(self, target: ResourceTarget, handle: OntologyHandle) -> Optional[ErrorDescriptor]:
        method, code = ENTITY_REMOVALS[target.kind]
        try:
            removed = getattr(handle, method)(target.uri)
        except Exception as e:
            logger.error(f"Error removing {target.kind.value} {target.uri} from {target.ontology_uri}: {e}")
            return ONTOLOGY_DELETE_ERRORS.instantiate(code, str(e))

        handle.add_annotation(ONTOLOGY_MODIFIED, "true")
        logger.info(f"Removed {target.kind.value} {target.uri} from {target.ontology_uri} ({removed} triples)")
        return None

    def _delete_ontology(self, handle: OntologyHandle) -> Optional[ErrorDescriptor]:
        try:
            handle.delete()
        except Exception as e:
            logger.error(f"Error deleting ontology {handle.ontology_uri}: {e}")
            return ONTOLOGY_DELETE_ERRORS.instantiate("_304", str(e))

        logger.info(f"Deleted ontology {handle.ontology_uri} from the ontology store")
        self._remove_hold_marker(handle.ontology_uri)
        return None

    def _remove_hold_marker(self, ontology_uri: str) -> None:
        query = (
            f"DELETE DATA {{ GRAPH {URIRef(self.datasets_registry_uri).n3()} {{ "
            f"{URIRef(ontology_uri).n3()} {WSF.holdOntology.n3()} \"true\" . }} }}"
        )
        try:
            self.triple_store.update(query)
        except Exception as e:
            # not retried nor rolled back, the ontology is already gone
            logger.warning(f"Could not remove the hold marker of {ontology_uri}: {e}")
