"""Domain errors.

Stores, the authenticator and the sync service raise these; only the HTTP
layer (readsync.routers.errors) turns them into status codes and envelopes.
"""
from enum import Enum


class ErrorKind(str, Enum):
    AUTH_FAILURE = "auth_failure"
    CONFLICT = "conflict"
    BAD_REQUEST = "bad_request"
    INTERNAL = "internal"


class SyncError(Exception):
    """Base class for every error the service reports to clients."""

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthFailure(SyncError):
    """Unknown user or wrong key. The two cases are deliberately the same error."""

    kind = ErrorKind.AUTH_FAILURE
    default_message = "Unauthorized"


class UserExists(SyncError):
    kind = ErrorKind.CONFLICT
    default_message = "User Exists"


class BadRequest(SyncError):
    kind = ErrorKind.BAD_REQUEST
    default_message = "Bad request"


class StorageFailure(SyncError):
    kind = ErrorKind.INTERNAL
