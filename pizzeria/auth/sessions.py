"""
Session Store

Server-side admin sessions keyed by an opaque token. The client only ever
holds the token, inside the signed Flask session cookie.
"""

import secrets
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


class SessionStoreUnavailable(Exception):
    """The session backend could not be reached."""


def _utcnow():
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Session:
    session_id: str
    admin: bool
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now):
        return now >= self.expires_at


class SessionStore:
    """In-process session store with absolute expiry.

    Sessions are not extended on use: a session created at T is gone at
    T + lifetime regardless of activity.
    """

    def __init__(self, lifetime=timedelta(hours=1), clock=None):
        self.lifetime = lifetime
        self._clock = clock or _utcnow
        self._sessions = {}
        self._lock = threading.Lock()

    def create(self, admin=True):
        now = self._clock()
        record = Session(
            session_id=secrets.token_urlsafe(32),
            admin=admin,
            created_at=now,
            expires_at=now + self.lifetime,
        )
        with self._lock:
            # Abandoned sessions (no logout) are dropped here
            self._evict_expired(now)
            self._sessions[record.session_id] = record
        return record

    def get(self, session_id):
        """Return the live session for ``session_id`` or None; expired ones are evicted."""
        if not session_id:
            return None
        with self._lock:
            record = self._sessions.get(session_id)
            if record is not None and record.is_expired(self._clock()):
                del self._sessions[session_id]
                return None
        return record

    def destroy(self, session_id):
        if not session_id:
            return
        with self._lock:
            self._sessions.pop(session_id, None)

    def purge_expired(self):
        with self._lock:
            return self._evict_expired(self._clock())

    def _evict_expired(self, now):
        """Drop expired sessions; the caller holds the lock."""
        expired = [sid for sid, record in self._sessions.items() if record.is_expired(now)]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)

    def __len__(self):
        with self._lock:
            return len(self._sessions)
