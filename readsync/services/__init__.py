from readsync.services.authenticator import Authenticator, CredentialAuthenticator
from readsync.services.credentials import CredentialStore
from readsync.services.progress import ProgressStore
from readsync.services.sync import SyncService, current_timestamp

__all__ = [
    "Authenticator",
    "CredentialAuthenticator",
    "CredentialStore",
    "ProgressStore",
    "SyncService",
    "current_timestamp",
]
