"""
In-memory RDF store holding the loaded ontologies.

Each ontology lives in its own named graph of an rdflib Dataset, keyed by the
ontology URI. Access goes through sessions: a session resolves an ontology
into a handle exposing the mutations the web services need.
"""

import logging
from typing import Dict, List, Optional, Union

from rdflib import Dataset, Graph, Literal, Namespace, OWL, RDF, RDFS, URIRef

from .domain import NamedIndividual, OntologyClass, OntologyProperty, ResolveResult

logger = logging.getLogger(__name__)

SKOS = Namespace("http://www.w3.org/2004/02/skos/core#")
WSF = Namespace("http://purl.org/ontology/wsf#")

PROPERTY_TYPES = {
    "ObjectProperty": OWL.ObjectProperty,
    "DatatypeProperty": OWL.DatatypeProperty,
    "AnnotationProperty": OWL.AnnotationProperty,
}


class OntologyStoreError(Exception):
    """Raised when the store cannot perform a mutation."""


class EntityNotFound(OntologyStoreError):
    """Raised when the entity to remove is not defined in the ontology."""


class OntologyStore:
    """Simple in-memory store of ontologies."""

    def __init__(self, dataset: Optional[Dataset] = None):
        self.dataset = dataset if dataset is not None else Dataset()
        self.dataset.bind("owl", OWL)
        self.dataset.bind("rdfs", RDFS)
        self.dataset.bind("skos", SKOS)
        self.dataset.bind("wsf", WSF)

    def add_ontology(self, ontology_uri: str) -> Graph:
        """Create (or get) the graph of an ontology and declare it."""
        uri = URIRef(ontology_uri)
        graph = self.dataset.graph(uri)
        graph.add((uri, RDF.type, OWL.Ontology))
        return graph

    def load_ontology(self, ontology_uri: str, source: str, format: Optional[str] = None) -> int:
        """Parse an ontology document into the store.

        Returns:
            Number of triples in the ontology graph after loading
        """
        graph = self.add_ontology(ontology_uri)
        graph.parse(source, format=format)
        logger.info(f"Loaded ontology {ontology_uri} from {source} ({len(graph)} triples)")
        return len(graph)

    def has_ontology(self, ontology_uri: str) -> bool:
        if not ontology_uri:
            return False
        uri = URIRef(ontology_uri)
        return (uri, RDF.type, OWL.Ontology) in self._graph(ontology_uri)

    def ontologies(self) -> List[str]:
        ontologies = set()
        for graph in self.dataset.graphs():
            if (graph.identifier, RDF.type, OWL.Ontology) in graph:
                ontologies.add(str(graph.identifier))
        return sorted(ontologies)

    def add_class(self, ontology_uri: str, ontology_class: OntologyClass) -> None:
        graph = self._graph(ontology_uri)
        graph.add((ontology_class.iri, RDF.type, OWL.Class))
        for lang, label in ontology_class.labels.items():
            graph.add((ontology_class.iri, SKOS.prefLabel, Literal(label, lang=lang)))
        for lang, definition in ontology_class.definitions.items():
            graph.add((ontology_class.iri, SKOS.definition, Literal(definition, lang=lang)))
        for parent_iri in ontology_class.parent_classes:
            graph.add((ontology_class.iri, RDFS.subClassOf, parent_iri))

    def add_property(self, ontology_uri: str, ontology_property: OntologyProperty) -> None:
        if ontology_property.property_type not in PROPERTY_TYPES:
            raise ValueError(f"Unknown property type: {ontology_property.property_type}")

        graph = self._graph(ontology_uri)
        graph.add((ontology_property.iri, RDF.type, PROPERTY_TYPES[ontology_property.property_type]))
        for lang, label in ontology_property.labels.items():
            graph.add((ontology_property.iri, SKOS.prefLabel, Literal(label, lang=lang)))
        if ontology_property.domain:
            graph.add((ontology_property.iri, RDFS.domain, ontology_property.domain))
        if ontology_property.range:
            graph.add((ontology_property.iri, RDFS.range, ontology_property.range))

    def add_named_individual(self, ontology_uri: str, individual: NamedIndividual) -> None:
        graph = self._graph(ontology_uri)
        graph.add((individual.iri, RDF.type, OWL.NamedIndividual))
        for lang, label in individual.labels.items():
            graph.add((individual.iri, SKOS.prefLabel, Literal(label, lang=lang)))
        for class_iri in individual.types:
            graph.add((individual.iri, RDF.type, class_iri))

    def has_entity(self, ontology_uri: str, iri: Union[str, URIRef]) -> bool:
        """Check whether anything in the ontology describes or references the IRI."""
        graph = self._graph(ontology_uri)
        iri = URIRef(iri)
        return (iri, None, None) in graph or (None, None, iri) in graph

    def remove_ontology(self, ontology_uri: str) -> None:
        self.dataset.remove_graph(URIRef(ontology_uri))

    def session(self, session_id: int = 0) -> "OntologyStoreSession":
        return OntologyStoreSession(self, session_id)

    def _graph(self, ontology_uri: str) -> Graph:
        # lookup view on the named graph, does not register it in the dataset
        return Graph(store=self.dataset.store, identifier=URIRef(ontology_uri))


class OntologyStoreSession:
    """Session on the ontology store, checked out for the lifetime of one request."""

    def __init__(self, store: OntologyStore, session_id: int = 0):
        self.store = store
        self.session_id = session_id
        self.requests_served = 0
        self._handles: Dict[str, "OntologyHandle"] = {}

    def resolve(self, ontology_uri: str) -> ResolveResult:
        """Resolve an ontology loaded in the store.

        Failures are returned, not raised: the caller decides how fatal they are.
        """
        if not ontology_uri:
            return ResolveResult.failure(ontology_uri, "No ontology URI to resolve")

        if ontology_uri in self._handles:
            return ResolveResult.success(ontology_uri, self._handles[ontology_uri])

        if not self.store.has_ontology(ontology_uri):
            return ResolveResult.failure(ontology_uri, f"Ontology {ontology_uri} is not loaded in the store")

        handle = OntologyHandle(self.store, ontology_uri)
        self._handles[ontology_uri] = handle
        return ResolveResult.success(ontology_uri, handle)

    def reset(self) -> None:
        """Forget the per-request state before going back to the pool."""
        self._handles.clear()
        self.requests_served += 1


class OntologyHandle:
    """Mutations available on a resolved ontology."""

    def __init__(self, store: OntologyStore, ontology_uri: str):
        self.store = store
        self.ontology_uri = ontology_uri
        self.iri = URIRef(ontology_uri)

    @property
    def graph(self) -> Graph:
        return self.store._graph(self.ontology_uri)

    def remove_class(self, class_uri: str) -> int:
        """Remove a class and all the triples referencing it.

        Returns:
            Number of removed triples

        Raises:
            EntityNotFound: If the class is not defined in the ontology
        """
        iri = URIRef(class_uri)
        if (iri, RDF.type, OWL.Class) not in self.graph:
            raise EntityNotFound(f"Class {class_uri} is not defined in {self.ontology_uri}")
        return self._remove_resource(iri)

    def remove_property(self, property_uri: str) -> int:
        """Remove a property, its uses as a predicate and all the triples referencing it."""
        iri = URIRef(property_uri)
        graph = self.graph
        if not any((iri, RDF.type, rdf_type) in graph for rdf_type in PROPERTY_TYPES.values()) \
                and (iri, RDF.type, RDF.Property) not in graph:
            raise EntityNotFound(f"Property {property_uri} is not defined in {self.ontology_uri}")

        removed = self._remove_resource(iri)

        # Remove all triples where this property is the predicate
        triples_to_remove = list(graph.triples((None, iri, None)))
        for triple in triples_to_remove:
            graph.remove(triple)

        return removed + len(triples_to_remove)

    def remove_named_individual(self, individual_uri: str) -> int:
        iri = URIRef(individual_uri)
        if (iri, RDF.type, OWL.NamedIndividual) not in self.graph:
            raise EntityNotFound(f"Named individual {individual_uri} is not defined in {self.ontology_uri}")
        return self._remove_resource(iri)

    def delete(self) -> None:
        """Remove the whole ontology from the store."""
        if not self.store.has_ontology(self.ontology_uri):
            raise EntityNotFound(f"Ontology {self.ontology_uri} is not loaded in the store")
        self.store.remove_ontology(self.ontology_uri)

    def add_annotation(self, property_uri: str, value: str) -> None:
        """Set an annotation on the ontology itself, replacing any previous value."""
        self.graph.set((self.iri, URIRef(property_uri), Literal(value)))

    def get_annotation(self, property_uri: str) -> Optional[str]:
        value = self.graph.value(self.iri, URIRef(property_uri))
        return str(value) if value is not None else None

    def _remove_resource(self, iri: URIRef) -> int:
        graph = self.graph

        # Remove all triples where the resource is the subject
        triples_to_remove = list(graph.triples((iri, None, None)))
        # ... and where it is the object (e.g., subclass relationships)
        triples_to_remove += list(graph.triples((None, None, iri)))

        for triple in triples_to_remove:
            graph.remove(triple)

        return len(triples_to_remove)
