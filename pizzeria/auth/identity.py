"""
Administrator Identity

The single administrator account. It is built from configuration at startup
and never persisted.
"""

import logging
import secrets
from dataclasses import dataclass, field

from werkzeug.security import check_password_hash, generate_password_hash

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdministratorIdentity:
    username: str
    password_hash: str = field(repr=False)

    def verify(self, username, password):
        """Check a credential pair.

        Both checks always run so an unknown username costs the same as a
        wrong password.
        """
        username_ok = secrets.compare_digest(username.encode('utf-8'), self.username.encode('utf-8'))
        password_ok = check_password_hash(self.password_hash, password)
        return username_ok and password_ok

    @classmethod
    def from_config(cls, config):
        """Build the identity from ADMIN_USERNAME and ADMIN_PASSWORD_HASH.

        ADMIN_PASSWORD is accepted as a development fallback and hashed here.
        """
        username = config.get('ADMIN_USERNAME')
        if not username:
            raise RuntimeError('ADMIN_USERNAME is not configured.')

        password_hash = config.get('ADMIN_PASSWORD_HASH')
        if not password_hash:
            password = config.get('ADMIN_PASSWORD')
            if not password:
                raise RuntimeError('ADMIN_PASSWORD_HASH is not configured.')
            logger.warning('ADMIN_PASSWORD_HASH not set; hashing ADMIN_PASSWORD at startup')
            password_hash = generate_password_hash(password)

        return cls(username=username, password_hash=password_hash)
