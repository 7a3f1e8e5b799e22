"""
High-level ontology delete service providing the public interface of the module.

This is the only public interface into the ontology_delete module. It wires
the permission store, the ontology store pool and the record/dataset
subsystems into a DeletePipeline.
"""

import logging
from typing import Optional

from rdflib import Dataset

from crud import CrudDelete, RecordStore
from dataset import DatasetDelete, DatasetRegistry
from framework.config import ServiceConfig
from framework.identity import Identity
from framework.response import ResponseState
from ontology import OntologyStore, OntologyStorePool
from permission import PermissionGate, PermissionStore
from .cascade import CascadeCoordinator
from .deleter import OntologyResourceDeleter
from .domain import DeleteOutcome, PipelineStage, ResourceKind, ResourceTarget
from .errors import ONTOLOGY_DELETE_ERRORS
from .pipeline import DeletePipeline

logger = logging.getLogger(__name__)


class OntologyDeleteService:
    """Deletes classes, properties, named individuals or whole ontologies."""

    def __init__(self, config: Optional[ServiceConfig] = None,
                 ontology_store: Optional[OntologyStore] = None,
                 triple_store: Optional[Dataset] = None,
                 permission_store: Optional[PermissionStore] = None):
        """Initialize the service.

        Args:
            config: Service configuration. If None, read from the environment.
            ontology_store: Store of the ontologies. If None, creates a new one.
            triple_store: System triple store (datasets registry and records). If None, creates a new one.
            permission_store: Access records. If None, creates a new one.
        """
        self.config = config if config is not None else ServiceConfig.from_env()
        self.ontology_store = ontology_store if ontology_store is not None else OntologyStore()
        self.triple_store = triple_store if triple_store is not None else Dataset()
        self.permission_store = permission_store if permission_store is not None else PermissionStore()

        self.records = RecordStore(self.triple_store)
        self.registry = DatasetRegistry(self.triple_store, self.config.datasets_registry_uri)
        self.pool = OntologyStorePool(self.ontology_store, self.config.pool_size, self.config.checkout_timeout)

        self.pipeline = DeletePipeline(
            gate=PermissionGate(self.permission_store, action="delete"),
            pool=self.pool,
            deleter=OntologyResourceDeleter(self.triple_store, self.config.datasets_registry_uri),
            cascade=CascadeCoordinator(
                CrudDelete(self.records, self.permission_store),
                DatasetDelete(self.registry, self.records, self.permission_store),
            ),
            registry_uri=self.config.ontologies_registry_uri,
        )

        logger.info(f"Ontology delete service ready at {self.service_uri} "
                    f"({self.config.pool_size} store sessions)")

    @property
    def service_uri(self) -> str:
        return self.config.service_uri("ontology/delete/")

    def register_ontology(self, ontology_uri: str, source: Optional[str] = None,
                          format: Optional[str] = None, title: str = "") -> None:
        """Load an ontology and register it as a held dataset of the system.

        Args:
            ontology_uri: URI of the ontology (also its dataset URI)
            source: Optional document to parse into the ontology graph
            format: rdflib parser format of the document
            title: Title of the dataset
        """
        if source:
            self.ontology_store.load_ontology(ontology_uri, source, format=format)
        else:
            self.ontology_store.add_ontology(ontology_uri)
        self.registry.register(ontology_uri, title=title, hold_ontology=True)

    def delete_class(self, ontology_uri: str, uri: str, requester: str, registered: str = "") -> DeleteOutcome:
        return self.delete(ResourceKind.CLASS, ontology_uri, uri, requester, registered)

    def delete_property(self, ontology_uri: str, uri: str, requester: str, registered: str = "") -> DeleteOutcome:
        return self.delete(ResourceKind.PROPERTY, ontology_uri, uri, requester, registered)

    def delete_named_individual(self, ontology_uri: str, uri: str, requester: str,
                                registered: str = "") -> DeleteOutcome:
        return self.delete(ResourceKind.NAMED_INDIVIDUAL, ontology_uri, uri, requester, registered)

    def delete_ontology(self, ontology_uri: str, requester: str, registered: str = "") -> DeleteOutcome:
        return self.delete(ResourceKind.ONTOLOGY, ontology_uri, "", requester, registered)

    def delete(self, kind: ResourceKind, ontology_uri: str, uri: str, requester: str,
               registered: str = "") -> DeleteOutcome:
        target = ResourceTarget.for_kind(kind, ontology_uri, uri)
        identity = Identity.from_request(requester, registered)
        return self.pipeline.run(target, identity)

    def process(self, function: str, ontology_uri: str, uri: str = "", requester: str = "",
                registered: str = "") -> DeleteOutcome:
        """Run the operation named by a selector ("deleteClass", "ontology", ...).

        Unknown selectors fail with a 400 before anything else is done.
        """
        kind = ResourceKind.from_function(function)
        if kind is None:
            response = ResponseState()
            response.return_error(400, "Bad Request", ONTOLOGY_DELETE_ERRORS, "_200", f"function: {function}")
            logger.warning(f"Unknown function call: {function!r}")
            return DeleteOutcome(stage=PipelineStage.VALIDATION_ERROR, response=response,
                                 history=[PipelineStage.START, PipelineStage.VALIDATION_ERROR])

        return self.delete(kind, ontology_uri, uri, requester, registered)
