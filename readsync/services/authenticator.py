"""Check a presented username/key pair against the credential store."""
import logging
from typing import Protocol

from readsync.core.errors import AuthFailure
from readsync.core.security import verify_password
from readsync.services.credentials import CredentialStore

logger = logging.getLogger(__name__)


class Authenticator(Protocol):
    async def authenticate(self, name: str, key: str) -> int:
        """Return the user id, or raise AuthFailure."""
        ...


class CredentialAuthenticator:
    """Username + key authentication against stored salted digests.

    Unknown users and wrong keys raise the same AuthFailure, so clients
    cannot probe which usernames exist.
    """

    def __init__(self, credentials: CredentialStore):
        self.credentials = credentials

    async def authenticate(self, name: str, key: str) -> int:
        user = await self.credentials.lookup_user(name)
        if user is None or not verify_password(key, user.salt, user.password):
            logger.info("authentication failed for user %r", name)
            raise AuthFailure()
        return user.id
