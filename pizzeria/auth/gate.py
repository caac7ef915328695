"""
Auth Gate

Checks credentials against the administrator identity and issues, looks up
and destroys admin sessions.
"""

import logging

from pizzeria.auth.sessions import SessionStoreUnavailable
from pizzeria.errors import AuthError, StoreError

logger = logging.getLogger(__name__)


class AuthGate:

    def __init__(self, identity, sessions):
        self.identity = identity
        self.sessions = sessions

    def login(self, username, password):
        """Return a new admin Session, or raise AuthError.

        The same AuthError is raised for every kind of bad credential. A
        session backend failure raises StoreError instead so callers can
        tell "try again" from "wrong password".
        """
        if not isinstance(username, str) or not isinstance(password, str):
            raise AuthError()
        if not self.identity.verify(username, password):
            raise AuthError()

        try:
            return self.sessions.create(admin=True)
        except SessionStoreUnavailable:
            logger.error('Could not create admin session', exc_info=True)
            raise StoreError('Session store unavailable.') from None

    def logout(self, session_id):
        """Destroy the session; unknown or missing ids are fine."""
        try:
            self.sessions.destroy(session_id)
        except SessionStoreUnavailable:
            logger.error('Could not destroy admin session', exc_info=True)
            raise StoreError('Session store unavailable.') from None

    def check(self, session_id):
        """Return the session if it is live and admin, else None."""
        try:
            record = self.sessions.get(session_id)
        except SessionStoreUnavailable:
            logger.error('Could not read admin session', exc_info=True)
            raise StoreError('Session store unavailable.') from None
        if record is None or record.admin is not True:
            return None
        return record
