"""
Domain models for the ontology module.

These models describe the entities held by the ontology store and the
outcome of resolving an ontology in a store session.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, TYPE_CHECKING
from rdflib import URIRef

if TYPE_CHECKING:
    from .store import OntologyHandle


@dataclass
class OntologyClass:
    """Represents a class of an ontology."""

    iri: URIRef
    labels: Dict[str, str] = field(default_factory=dict)        # language -> label
    definitions: Dict[str, str] = field(default_factory=dict)   # language -> definition
    parent_classes: List[URIRef] = field(default_factory=list)  # rdfs:subClassOf


@dataclass
class OntologyProperty:
    """Represents a property (object, datatype or annotation) of an ontology."""

    iri: URIRef
    labels: Dict[str, str] = field(default_factory=dict)
    property_type: str = "ObjectProperty"  # "ObjectProperty" | "DatatypeProperty" | "AnnotationProperty"
    domain: Optional[URIRef] = None
    range: Optional[URIRef] = None


@dataclass
class NamedIndividual:
    """Represents a named individual of an ontology."""

    iri: URIRef
    labels: Dict[str, str] = field(default_factory=dict)
    types: List[URIRef] = field(default_factory=list)           # classes it is an instance of


@dataclass
class ResolveResult:
    """Outcome of resolving an ontology in a store session."""

    ontology_uri: str
    handle: Optional["OntologyHandle"] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.handle is not None

    @classmethod
    def success(cls, ontology_uri: str, handle: "OntologyHandle") -> "ResolveResult":
        return cls(ontology_uri=ontology_uri, handle=handle)

    @classmethod
    def failure(cls, ontology_uri: str, error: str) -> "ResolveResult":
        return cls(ontology_uri=ontology_uri, error=error)
