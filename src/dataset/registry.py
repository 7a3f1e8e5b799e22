"""
Registry of the datasets known to the system.

Dataset descriptions live in the "<wsf_graph>datasets/" graph of the system
triple store. Ontologies are datasets too; a loaded ontology carries a
wsf:holdOntology "true" marker in the registry.
"""

from typing import Any, Dict, List, Optional

from rdflib import Dataset, Graph, Literal, Namespace, RDF, URIRef
from rdflib.namespace import DCTERMS

WSF = Namespace("http://purl.org/ontology/wsf#")
VOID = Namespace("http://rdfs.org/ns/void#")


class DatasetRegistry:
    """Descriptions of the registered datasets."""

    def __init__(self, dataset: Dataset, registry_uri: str):
        self.dataset = dataset
        self.registry_uri = registry_uri
        self.dataset.bind("void", VOID)
        self.dataset.bind("dcterms", DCTERMS)

    @property
    def graph(self) -> Graph:
        return Graph(store=self.dataset.store, identifier=URIRef(self.registry_uri))

    def register(self, dataset_uri: str, title: str = "", creator: str = "",
                 hold_ontology: bool = False) -> None:
        uri = URIRef(dataset_uri)
        graph = self.dataset.graph(URIRef(self.registry_uri))
        graph.add((uri, RDF.type, VOID.Dataset))
        if title:
            graph.add((uri, DCTERMS.title, Literal(title)))
        if creator:
            graph.add((uri, DCTERMS.creator, Literal(creator)))
        if hold_ontology:
            graph.add((uri, WSF.holdOntology, Literal("true")))

    def is_registered(self, dataset_uri: str) -> bool:
        return (URIRef(dataset_uri), RDF.type, VOID.Dataset) in self.graph

    def has_hold_marker(self, dataset_uri: str) -> bool:
        return (URIRef(dataset_uri), WSF.holdOntology, Literal("true")) in self.graph

    def datasets(self) -> List[str]:
        return sorted(str(uri) for uri in self.graph.subjects(RDF.type, VOID.Dataset))

    def describe(self, dataset_uri: str) -> Optional[Dict[str, Any]]:
        if not self.is_registered(dataset_uri):
            return None
        uri = URIRef(dataset_uri)
        title = self.graph.value(uri, DCTERMS.title)
        creator = self.graph.value(uri, DCTERMS.creator)
        return {
            "uri": dataset_uri,
            "title": str(title) if title is not None else "",
            "creator": str(creator) if creator is not None else "",
            "hold_ontology": self.has_hold_marker(dataset_uri),
        }

    def remove(self, dataset_uri: str) -> int:
        """Remove the description of a dataset.

        Returns:
            Number of removed triples
        """
        graph = self.graph
        triples_to_remove = list(graph.triples((URIRef(dataset_uri), None, None)))
        for triple in triples_to_remove:
            graph.remove(triple)
        return len(triples_to_remove)
