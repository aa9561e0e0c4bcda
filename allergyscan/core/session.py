"""Authenticated sessions and the process-wide registry that caches them by token."""
import hashlib
import threading
import time
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    user_id: str
    email: str
    access_token: str


def _token_key(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


class SessionRegistry:
    """Short-TTL cache of token -> Session. Created at startup, cleared at shutdown."""

    def __init__(self, ttl_seconds: int = 60, max_size: int = 500):
        self.ttl_seconds = ttl_seconds
        self.max_size = max_size
        self._lock = threading.Lock()
        self._sessions: Dict[str, Tuple[Session, float]] = {}

    def get(self, token: str) -> Optional[Session]:
        key = _token_key(token)
        now = time.monotonic()
        with self._lock:
            entry = self._sessions.get(key)
            if entry is None:
                return None
            session, expiry = entry
            if now >= expiry:
                del self._sessions[key]
                return None
            return session

    def put(self, session: Session) -> None:
        key = _token_key(session.access_token)
        with self._lock:
            if key not in self._sessions and len(self._sessions) >= self.max_size:
                return
            self._sessions[key] = (session, time.monotonic() + self.ttl_seconds)

    def remove(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(_token_key(token), None)
        logger.debug("Removed cached session")

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
