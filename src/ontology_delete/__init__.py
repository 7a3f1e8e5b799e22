"""
Ontology Delete Module

Deletes classes, properties, named individuals or entire ontologies from the
ontology store, then cascades the deletion into the record store and the
dataset registry.

Public Interface:
- OntologyDeleteService: High-level service for all delete operations

Private Components:
- DeletePipeline: Authorization -> store deletion -> cascade
- OntologyResourceDeleter / CascadeCoordinator: The pipeline's stages
- Domain models: ResourceKind, ResourceTarget, PipelineStage, DeleteOutcome
"""

from .service import OntologyDeleteService

__all__ = ["OntologyDeleteService"]
