"""
Domain models for the ontology delete service.

These models describe what is being deleted, where the delete pipeline
stopped, and what the caller gets back.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from framework.response import ResponseState


class ResourceKind(str, Enum):
    """Kinds of resources the service can delete."""
    CLASS = "class"
    PROPERTY = "property"
    NAMED_INDIVIDUAL = "named_individual"
    ONTOLOGY = "ontology"

    @classmethod
    def from_function(cls, function: str) -> Optional["ResourceKind"]:
        """Parse an operation selector: "class", "deleteClass", "delete_class", ...

        Returns:
            The matching kind, or None for an unknown selector
        """
        if not function:
            return None
        name = function.strip()
        for prefix in ("delete_", "delete"):
            if name.lower().startswith(prefix) and len(name) > len(prefix):
                name = name[len(prefix):]
                break
        # camelCase -> snake_case ("NamedIndividual" -> "named_individual")
        normalized = "".join("_" + c.lower() if c.isupper() else c for c in name).lstrip("_")
        try:
            return cls(normalized)
        except ValueError:
            return None


@dataclass(frozen=True)
class ResourceTarget:
    """The resource a request deletes. For an ontology, `uri` is the ontology URI."""

    kind: ResourceKind
    ontology_uri: str
    uri: str = ""

    @classmethod
    def for_kind(cls, kind: ResourceKind, ontology_uri: str, uri: str = "") -> "ResourceTarget":
        if kind is ResourceKind.ONTOLOGY:
            return cls(kind=kind, ontology_uri=ontology_uri, uri=ontology_uri)
        return cls(kind=kind, ontology_uri=ontology_uri, uri=uri)


class PipelineStage(str, Enum):
    """Stages of the delete pipeline; the *_ERROR stages are terminal failures."""
    START = "start"
    AUTHORIZED = "authorized"
    STORE_DELETED = "store_deleted"
    CASCADED = "cascaded"
    DONE = "done"
    AUTH_ERROR = "auth_error"
    VALIDATION_ERROR = "validation_error"
    STORE_ERROR = "store_error"
    CASCADE_ERROR = "cascade_error"

    @property
    def is_error(self) -> bool:
        return self.value.endswith("_error")


@dataclass
class DeleteOutcome:
    """Result of one pipeline run."""

    stage: PipelineStage
    response: ResponseState
    history: List[PipelineStage] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.stage is PipelineStage.DONE and self.response.is_ok()
