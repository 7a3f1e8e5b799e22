"""
CRUD Delete web service: removes the description of one record from a dataset.
"""

import logging

from framework.errors import ErrorCatalog, ErrorLevel
from framework.identity import Identity
from framework.response import ResponseState
from permission import PermissionGate, PermissionStore
from .store import RecordStore

logger = logging.getLogger(__name__)


CRUD_DELETE_ERRORS = ErrorCatalog("/ws/crud/delete/", {
    "_200": {
        "id": "WS-CRUD-DELETE-200",
        "level": ErrorLevel.WARNING.value,
        "name": "No resource URI to delete specified",
        "description": "No resource URI has been defined for this query",
    },
    "_201": {
        "id": "WS-CRUD-DELETE-201",
        "level": ErrorLevel.WARNING.value,
        "name": "No dataset specified",
        "description": "No dataset URI defined for this query",
    },
    "_300": {
        "id": "WS-CRUD-DELETE-300",
        "level": ErrorLevel.ERROR.value,
        "name": "Can't delete the record",
        "description": "An error occurred when we tried to delete the record from the dataset",
    },
})


class CrudDelete:
    """Deletes records, after validating both identities on the record's dataset."""

    def __init__(self, record_store: RecordStore, permission_store: PermissionStore):
        self.records = record_store
        self.gate = PermissionGate(permission_store, action="delete")

    def delete(self, uri: str, dataset_uri: str, identity: Identity) -> ResponseState:
        """Delete the record `uri` from `dataset_uri`.

        A record that is not indexed in the dataset is not an error: there is
        simply nothing to clean up.

        Returns:
            The state of the call; status 200 on success
        """
        response = ResponseState()

        if not uri:
            response.return_error(400, "Bad Request", CRUD_DELETE_ERRORS, "_200")
            return response

        if not dataset_uri:
            response.return_error(400, "Bad Request", CRUD_DELETE_ERRORS, "_201")
            return response

        check = self.gate.authorize_identities(identity, dataset_uri)
        if not check.ok:
            response.propagate(check)
            return response

        try:
            removed = self.records.delete_record(dataset_uri, uri)
        except Exception as e:
            logger.error(f"Error deleting record {uri} from {dataset_uri}: {e}")
            response.return_error(500, "Internal Error", CRUD_DELETE_ERRORS, "_300", str(e))
            return response

        logger.info(f"Deleted record {uri} from {dataset_uri} ({removed} triples)")
        return response
