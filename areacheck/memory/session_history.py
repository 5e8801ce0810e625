"""Per-session, append-only check history.

Purpose of this abstraction:
    Keep one ordered log of `CheckRecord`s per session and make the
    "get-or-create history, then append" sequence atomic under concurrent requests
    sharing a session.

Locking model:
    - Each `SessionHistory` owns a lock guarding its record list. Appends and
      snapshots for one session are serialized on that lock only.
    - The store keeps a registry lock used solely to create a missing history and
      to drop histories. Lookups of an existing history do not take it, so
      established sessions never contend with each other.
    - Callers only ever receive tuple snapshots; the underlying list is never
      exposed for external mutation.

Invalidation races:
    A dropped history is closed under its own lock. An append that fetched the
    history just before it was dropped finds it closed and retries against a fresh
    history, so a record is never written into an orphaned log.

Lifecycle:
    Histories are created lazily on the first append and live until the owning
    transport layer calls `invalidate` or `expire_idle`. Growth is unbounded; the
    pipeline never expires or caps a history.
"""

import logging
import threading
import time

logger = logging.getLogger(__name__)


class SessionHistory:
    """Ordered record log for one session."""

    def __init__(self, now):
        self._records = []
        self._lock = threading.Lock()
        self._closed = False
        self.last_access = now

    def append(self, record, now):
        """Append `record` and return a snapshot including it, or `None` if closed."""
        with self._lock:
            if self._closed:
                return None
            self._records.append(record)
            self.last_access = now
            return tuple(self._records)

    def snapshot(self, now):
        with self._lock:
            self.last_access = now
            return tuple(self._records)

    def close(self):
        with self._lock:
            self._closed = True


class SessionHistoryStore:
    """Session-keyed registry of `SessionHistory` objects.

    Args:
        clock: Monotonic seconds source used for idle tracking.
    """

    def __init__(self, clock=time.monotonic):
        self._sessions = {}
        self._registry_lock = threading.Lock()
        self._clock = clock

    def _get_or_create(self, session_id):
        history = self._sessions.get(session_id)
        if history is not None:
            return history

        with self._registry_lock:
            history = self._sessions.get(session_id)
            if history is None:
                history = SessionHistory(self._clock())
                self._sessions[session_id] = history
                logger.debug("Created history for session %s", session_id)
            return history

    def append(self, session_id, record):
        """Append `record` to the session's history, creating it on first use.

        Returns:
            Tuple snapshot of the full history, oldest first, taken atomically with
            the append so it always contains `record`.
        """
        while True:
            snapshot = self._get_or_create(session_id).append(record, self._clock())
            if snapshot is not None:
                return snapshot

    def get(self, session_id):
        """Return the session's history snapshot, or an empty tuple if none exists."""
        history = self._sessions.get(session_id)
        if history is None:
            return ()
        return history.snapshot(self._clock())

    def invalidate(self, session_id):
        """Drop the session's history. Called by the transport layer only."""
        with self._registry_lock:
            removed = self._sessions.pop(session_id, None)
        if removed is None:
            return False

        removed.close()
        logger.debug("Invalidated history for session %s", session_id)
        return True

    def expire_idle(self, ttl_seconds):
        """Drop every history not accessed within `ttl_seconds`.

        Returns:
            Number of histories dropped.
        """
        cutoff = self._clock() - ttl_seconds
        with self._registry_lock:
            expired = [
                session_id
                for session_id, history in self._sessions.items()
                if history.last_access < cutoff
            ]
            removed = [self._sessions.pop(session_id) for session_id in expired]

        for history in removed:
            history.close()
        if removed:
            logger.debug("Expired %d idle session histories", len(removed))
        return len(removed)

    def __contains__(self, session_id):
        return session_id in self._sessions

    def __len__(self):
        return len(self._sessions)
