"""
Dataset Delete web service: deregisters a dataset and drops everything it holds.
"""

import logging

from crud.store import RecordStore
from framework.errors import ErrorCatalog, ErrorLevel
from framework.identity import Identity
from framework.response import ResponseState
from permission import PermissionGate, PermissionStore
from .registry import DatasetRegistry

logger = logging.getLogger(__name__)


DATASET_DELETE_ERRORS = ErrorCatalog("/ws/dataset/delete/", {
    "_200": {
        "id": "WS-DATASET-DELETE-200",
        "level": ErrorLevel.WARNING.value,
        "name": "No unique identifier specified for this dataset",
        "description": "No URI defined for this new dataset",
    },
    "_300": {
        "id": "WS-DATASET-DELETE-300",
        "level": ErrorLevel.ERROR.value,
        "name": "Can't delete the dataset",
        "description": "An error occurred when we tried to delete the dataset from the system",
    },
})


class DatasetDelete:
    """Removes a dataset's description, its records and its access records."""

    def __init__(self, registry: DatasetRegistry, record_store: RecordStore,
                 permission_store: PermissionStore):
        self.registry = registry
        self.records = record_store
        self.permissions = permission_store
        self.gate = PermissionGate(permission_store, action="delete")

    def delete(self, dataset_uri: str, identity: Identity) -> ResponseState:
        response = ResponseState()

        if not dataset_uri:
            response.return_error(400, "Bad Request", DATASET_DELETE_ERRORS, "_200")
            return response

        check = self.gate.authorize_identities(identity, dataset_uri)
        if not check.ok:
            response.propagate(check)
            return response

        try:
            description = self.registry.remove(dataset_uri)
            records = self.records.drop_dataset(dataset_uri)
            accesses = self.permissions.revoke_scope(dataset_uri)
        except Exception as e:
            logger.error(f"Error deleting dataset {dataset_uri}: {e}")
            response.return_error(500, "Internal Error", DATASET_DELETE_ERRORS, "_300", str(e))
            return response

        logger.info(f"Deleted dataset {dataset_uri}: {description} description triples, "
                    f"{records} record triples, {accesses} access records")
        return response
