"""Dependency wiring: stores, authenticator and sync service per request."""
from typing import Annotated, NamedTuple

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from readsync.core.config import Settings
from readsync.db.session import get_db
from readsync.services.authenticator import Authenticator, CredentialAuthenticator
from readsync.services.credentials import CredentialStore
from readsync.services.progress import ProgressStore
from readsync.services.sync import Clock, SyncService, current_timestamp


class Credentials(NamedTuple):
    username: str
    key: str


def get_credentials(
    x_auth_user: Annotated[str, Header()] = "",
    x_auth_key: Annotated[str, Header()] = "",
) -> Credentials:
    """X-Auth-User / X-Auth-Key; missing headers become empty strings and fail auth later."""
    return Credentials(x_auth_user, x_auth_key)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_credential_store(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CredentialStore:
    return CredentialStore(db, salt_length=settings.salt_length)


def get_authenticator(
    credentials: Annotated[CredentialStore, Depends(get_credential_store)],
) -> Authenticator:
    """Override this dependency to plug in a different credential scheme."""
    return CredentialAuthenticator(credentials)


def get_progress_store(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ProgressStore:
    return ProgressStore(db, record_history=settings.record_history)


def get_clock() -> Clock:
    return current_timestamp


def get_sync_service(
    credentials: Annotated[CredentialStore, Depends(get_credential_store)],
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
    progress: Annotated[ProgressStore, Depends(get_progress_store)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> SyncService:
    return SyncService(credentials, authenticator, progress, clock=clock)
