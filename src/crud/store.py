"""
Record store: the descriptions of the records indexed in each dataset.

Every dataset is a named graph of the system triple store; a record is the
set of triples whose subject is the record URI.
"""

from typing import Dict, Iterable, Optional

from rdflib import Dataset, Graph, Literal, RDF, RDFS, URIRef


class RecordStore:
    """Records of the datasets, kept in an rdflib Dataset."""

    def __init__(self, dataset: Optional[Dataset] = None):
        self.dataset = dataset if dataset is not None else Dataset()

    def add_record(self, dataset_uri: str, record_uri: str,
                   types: Iterable[str] = (), labels: Optional[Dict[str, str]] = None) -> None:
        graph = self.dataset.graph(URIRef(dataset_uri))
        record = URIRef(record_uri)
        for rdf_type in types:
            graph.add((record, RDF.type, URIRef(rdf_type)))
        for lang, label in (labels or {}).items():
            graph.add((record, RDFS.label, Literal(label, lang=lang)))

    def has_record(self, dataset_uri: str, record_uri: str) -> bool:
        return (URIRef(record_uri), None, None) in self._graph(dataset_uri)

    def count_records(self, dataset_uri: str) -> int:
        return len(set(self._graph(dataset_uri).subjects()))

    def delete_record(self, dataset_uri: str, record_uri: str) -> int:
        """Remove the description of a record.

        Returns:
            Number of removed triples (0 if the record was not indexed)
        """
        graph = self._graph(dataset_uri)
        triples_to_remove = list(graph.triples((URIRef(record_uri), None, None)))
        for triple in triples_to_remove:
            graph.remove(triple)
        return len(triples_to_remove)

    def drop_dataset(self, dataset_uri: str) -> int:
        """Remove every record of a dataset.

        Returns:
            Number of removed triples
        """
        removed = len(self._graph(dataset_uri))
        self.dataset.remove_graph(URIRef(dataset_uri))
        return removed

    def _graph(self, dataset_uri: str) -> Graph:
        return Graph(store=self.dataset.store, identifier=URIRef(dataset_uri))
