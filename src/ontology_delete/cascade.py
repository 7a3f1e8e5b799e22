"""
Cascading deletes into the record and dataset subsystems.

Runs only after the ontology store mutation succeeded. A failing collaborator
does not undo that mutation; its state is handed back to be copied as is
into the caller's response.
"""

import logging
from typing import Optional

from crud.delete import CrudDelete
from dataset.delete import DatasetDelete
from framework.identity import Identity
from framework.response import ResponseState
from .domain import ResourceKind, ResourceTarget

logger = logging.getLogger(__name__)


class CascadeCoordinator:
    """Keeps the record store and the dataset registry in line with a store deletion."""

    def __init__(self, crud_delete: CrudDelete, dataset_delete: DatasetDelete):
        self.crud_delete = crud_delete
        self.dataset_delete = dataset_delete

    def cascade(self, target: ResourceTarget, identity: Identity) -> Optional[ResponseState]:
        """Delegate the deletion to the sibling subsystem owning the target's records.

        Returns:
            None on success, otherwise the collaborator's failing state
        """
        if target.kind is ResourceKind.ONTOLOGY:
            state = self.dataset_delete.delete(target.ontology_uri, identity)
            collaborator = "dataset delete"
        else:
            state = self.crud_delete.delete(target.uri, target.ontology_uri, identity)
            collaborator = "crud delete"

        if state.is_ok():
            return None

        error_id = state.error.id if state.error else None
        logger.warning(f"Cascade to {collaborator} failed for {target.uri}: "
                       f"{state.status} {state.status_message} ({error_id})")
        return state
