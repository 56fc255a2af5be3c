"""
In-process session registry.
Maps session id -> live interview state and serializes work per session.
"""
import logging
from contextlib import contextmanager
from threading import Lock, RLock
from typing import Any, Dict, Iterator, List, TYPE_CHECKING

from interview.errors import SessionNotFoundError

if TYPE_CHECKING:
    from interview.state import InterviewStateMachine

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Thread-safe store for interview sessions.

    Lifecycle: created on start, updated on every answer, deleted once the
    final report is produced. `locked(session_id)` must wrap any
    read-modify-write of a session.
    """

    def __init__(self):
        self._sessions: Dict[str, "InterviewStateMachine"] = {}
        # session id -> [lock, holders + waiters]
        self._locks: Dict[str, List[Any]] = {}
        self._guard = RLock()

    @contextmanager
    def locked(self, session_id: str) -> Iterator[None]:
        """
        Hold the per-session lock for the duration of the block.

        A lock exists only while some caller holds or waits for it, so ids
        that are never created (or already finished) leave nothing behind.
        """
        with self._guard:
            entry = self._locks.setdefault(session_id, [Lock(), 0])
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[session_id]

    def lock_count(self) -> int:
        """Number of session locks currently held or waited on."""
        with self._guard:
            return len(self._locks)

    def create(self, session: "InterviewStateMachine") -> None:
        """Store a new session, replacing any existing one with the same id."""
        with self._guard:
            replaced = session.session_id in self._sessions
            self._sessions[session.session_id] = session
        if replaced:
            logger.info(f"Session {session.session_id} restarted, previous state discarded")

    def get(self, session_id: str) -> "InterviewStateMachine":
        with self._guard:
            stored = self._sessions.get(session_id)
        if stored is None:
            raise SessionNotFoundError(session_id)
        return stored

    def update(self, session: "InterviewStateMachine") -> None:
        with self._guard:
            if session.session_id not in self._sessions:
                raise SessionNotFoundError(session.session_id)
            self._sessions[session.session_id] = session

    def delete(self, session_id: str) -> None:
        with self._guard:
            self._sessions.pop(session_id, None)

    def exists(self, session_id: str) -> bool:
        with self._guard:
            return session_id in self._sessions

    def count(self) -> int:
        with self._guard:
            return len(self._sessions)

    def clear(self) -> None:
        """Drop every session. Locks held by in-flight calls stay in place."""
        with self._guard:
            self._sessions.clear()


# Global instance
session_store = SessionStore()
