"""
The delete pipeline: authorize, delete from the ontology store, cascade.

    START -> AUTHORIZED -> STORE_DELETED -> CASCADED -> DONE

Any failing stage fills the response state and the run stops there
(AUTH_ERROR, VALIDATION_ERROR, STORE_ERROR or CASCADE_ERROR). A busy pool is
a STORE_ERROR too. Nothing is rolled back: a cascade failure leaves the store
deletion in place.
"""

import logging
from typing import Optional

from framework.identity import Identity
from framework.response import ResponseState
from ontology.pool import OntologyStorePool, PoolExhausted
from ontology.store import OntologyStoreSession
from permission.gate import PermissionGate
from .cascade import CascadeCoordinator
from .deleter import OntologyResourceDeleter
from .domain import DeleteOutcome, PipelineStage, ResourceKind, ResourceTarget
from .errors import ONTOLOGY_DELETE_ERRORS

logger = logging.getLogger(__name__)

# Error returned when the URI required by a resource kind is missing
MISSING_URI_CODES = {
    ResourceKind.PROPERTY: "_202",
    ResourceKind.NAMED_INDIVIDUAL: "_203",
    ResourceKind.CLASS: "_204",
}


class DeletePipeline:
    """Runs one delete request through all the stages, stopping at the first failure."""

    def __init__(self, gate: PermissionGate, pool: OntologyStorePool,
                 deleter: OntologyResourceDeleter, cascade: CascadeCoordinator,
                 registry_uri: str):
        """
        Args:
            gate: Permission gate of the permission store
            pool: Ontology store sessions
            deleter: Ontology store mutations
            cascade: Record and dataset collaborators
            registry_uri: Scope covering all the ontologies
        """
        self.gate = gate
        self.pool = pool
        self.deleter = deleter
        self.cascade = cascade
        self.registry_uri = registry_uri

    def run(self, target: ResourceTarget, identity: Identity) -> DeleteOutcome:
        response = ResponseState()
        outcome = DeleteOutcome(stage=PipelineStage.START, response=response,
                                history=[PipelineStage.START])

        # Both the requester and the identity it acts for must be allowed
        check = self.gate.authorize_identities(identity, target.ontology_uri, self.registry_uri)
        if not check.ok:
            response.propagate(check)
            return self._stop(outcome, PipelineStage.AUTH_ERROR, target)
        self._advance(outcome, PipelineStage.AUTHORIZED, target)

        if not target.ontology_uri:
            response.return_error(400, "Bad Request", ONTOLOGY_DELETE_ERRORS, "_201")
            return self._stop(outcome, PipelineStage.VALIDATION_ERROR, target)

        if target.kind in MISSING_URI_CODES and not target.uri:
            response.return_error(400, "Bad Request", ONTOLOGY_DELETE_ERRORS, MISSING_URI_CODES[target.kind])
            return self._stop(outcome, PipelineStage.VALIDATION_ERROR, target)

        try:
            with self.pool.checkout() as session:
                stopped = self._delete_and_cascade(session, target, identity, outcome)
        except PoolExhausted as e:
            response.return_error(503, "Service Unavailable", ONTOLOGY_DELETE_ERRORS, "_305", str(e))
            return self._stop(outcome, PipelineStage.STORE_ERROR, target)

        if stopped is not None:
            return stopped
        self._advance(outcome, PipelineStage.DONE, target)
        return outcome

    def _delete_and_cascade(self, session: OntologyStoreSession, target: ResourceTarget,
                            identity: Identity, outcome: DeleteOutcome) -> Optional[DeleteOutcome]:
        """Store deletion and cascade, run while holding a session. Returns the outcome if stopped."""
        response = outcome.response

        error = self.deleter.delete(target, session)
        if error is not None:
            response.set_status(400, "Bad Request", error.name)
            response.set_error(error)
            return self._stop(outcome, PipelineStage.STORE_ERROR, target)
        self._advance(outcome, PipelineStage.STORE_DELETED, target)

        failure = self.cascade.cascade(target, identity)
        if failure is not None:
            response.propagate(failure)
            return self._stop(outcome, PipelineStage.CASCADE_ERROR, target)
        self._advance(outcome, PipelineStage.CASCADED, target)
        return None

    def _advance(self, outcome: DeleteOutcome, stage: PipelineStage, target: ResourceTarget) -> None:
        outcome.stage = stage
        outcome.history.append(stage)
        logger.info(f"Delete {target.kind.value} {target.uri or target.ontology_uri}: {stage.value}")

    def _stop(self, outcome: DeleteOutcome, stage: PipelineStage, target: ResourceTarget) -> DeleteOutcome:
        outcome.stage = stage
        outcome.history.append(stage)
        response = outcome.response
        error_id = response.error.id if response.error else None
        logger.warning(f"Delete {target.kind.value} {target.uri or target.ontology_uri} stopped at "
                       f"{stage.value}: {response.status} {response.status_message} ({error_id})")
        return outcome
