"""
Fixed-size pool of ontology store sessions.

Every request checks a session out for its whole lifetime and gives it back
when done, whatever the outcome.
"""

import logging
import queue
from contextlib import contextmanager
from typing import Iterator, Optional

from .store import OntologyStore, OntologyStoreSession

logger = logging.getLogger(__name__)


class PoolExhausted(Exception):
    """Raised when no session frees up before the checkout timeout."""


class OntologyStorePool:
    """Hands out OntologyStoreSession objects, one request at a time per session."""

    def __init__(self, store: OntologyStore, size: int = 4, timeout: Optional[float] = None):
        """
        Args:
            store: Store the sessions operate on
            size: Number of sessions in the pool
            timeout: Seconds to wait for a free session; None waits forever
        """
        if size < 1:
            raise ValueError(f"Pool size must be at least 1, got {size}")

        self.store = store
        self.size = size
        self.timeout = timeout
        self._idle: "queue.Queue[OntologyStoreSession]" = queue.Queue(maxsize=size)
        for session_id in range(size):
            self._idle.put(store.session(session_id))

    @property
    def available(self) -> int:
        return self._idle.qsize()

    @contextmanager
    def checkout(self) -> Iterator[OntologyStoreSession]:
        """Borrow a session; it is returned to the pool on every exit path."""
        try:
            session = self._idle.get(timeout=self.timeout)
        except queue.Empty:
            raise PoolExhausted(f"No ontology store session available after {self.timeout}s") from None

        logger.debug(f"Checked out ontology store session {session.session_id}")
        try:
            yield session
        finally:
            session.reset()
            self._idle.put(session)
            logger.debug(f"Released ontology store session {session.session_id}")
