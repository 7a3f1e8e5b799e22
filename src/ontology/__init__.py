"""
Ontology Store Module

This module provides an in-memory store of the ontologies managed by the
system, accessed through pooled sessions.

Public Interface:
- OntologyStore: RDF store with one named graph per ontology
- OntologyStorePool: Per-request session checkout

Private Components:
- OntologyStoreSession / OntologyHandle: Resolution and mutation of one ontology
- Domain models: OntologyClass, OntologyProperty, NamedIndividual, ResolveResult
"""

from .pool import OntologyStorePool, PoolExhausted
from .store import OntologyStore, OntologyStoreError, EntityNotFound

__all__ = ["OntologyStore", "OntologyStorePool", "PoolExhausted", "OntologyStoreError", "EntityNotFound"]
