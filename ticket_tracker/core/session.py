# ticket_tracker/core/session.py
import logging
import secrets
import threading
import time

from fastapi import Depends, HTTPException, Request

from ticket_tracker.core.config import get_settings
from ticket_tracker.ticket.store import TicketStore

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Maps session ids to their ticket stores.

    Entries not touched for ``ttl_seconds`` are dropped on the next access.
    """

    def __init__(self, ttl_seconds: float, clock=time.monotonic) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._stores: dict[str, TicketStore] = {}
        self._last_seen: dict[str, float] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._stores)

    def __contains__(self, sid: str) -> bool:
        with self._lock:
            return sid in self._stores

    def open(self) -> str:
        sid = secrets.token_urlsafe(16)
        with self._lock:
            self._purge_expired()
            self._stores[sid] = TicketStore()
            self._last_seen[sid] = self._clock()
        logger.info("Opened session %s", sid[:8])
        return sid

    def get(self, sid: str) -> TicketStore:
        """Return the store for ``sid``, starting an empty one if it is unknown."""
        with self._lock:
            self._purge_expired()
            store = self._stores.get(sid)
            if store is None:
                store = self._stores[sid] = TicketStore()
            self._last_seen[sid] = self._clock()
            return store

    def discard(self, sid: str) -> None:
        with self._lock:
            self._stores.pop(sid, None)
            self._last_seen.pop(sid, None)
        logger.info("Closed session %s", sid[:8])

    def _purge_expired(self) -> None:
        cutoff = self._clock() - self.ttl_seconds
        expired = [sid for sid, seen in self._last_seen.items() if seen < cutoff]
        for sid in expired:
            del self._stores[sid]
            del self._last_seen[sid]
        if expired:
            logger.info("Purged %d expired sessions", len(expired))


registry = SessionRegistry(ttl_seconds=get_settings().SESSION_MAX_AGE)


# Common session dependencies
def get_registry() -> SessionRegistry:
    return registry


def get_current_user(request: Request) -> str:
    user = request.session.get("user")
    if not user:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user


def get_ticket_store(
    request: Request,
    user: str = Depends(get_current_user),
    sessions: SessionRegistry = Depends(get_registry),
) -> TicketStore:
    sid = request.session.get("sid")
    if not sid:
        sid = request.session["sid"] = sessions.open()
    return sessions.get(sid)
