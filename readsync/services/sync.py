"""Sync service: account creation, auth check, progress push and pull."""
import time
from typing import Callable

from readsync.schemas.progress import ProgressAckSchema, ProgressPushSchema, ProgressRecord
from readsync.services.authenticator import Authenticator
from readsync.services.credentials import CredentialStore
from readsync.services.progress import ProgressStore

Clock = Callable[[], int]


def current_timestamp() -> int:
    return int(time.time())


class SyncService:
    def __init__(
        self,
        credentials: CredentialStore,
        authenticator: Authenticator,
        progress: ProgressStore,
        clock: Clock = current_timestamp,
    ):
        self.credentials = credentials
        self.authenticator = authenticator
        self.progress = progress
        self.clock = clock

    async def create_account(self, name: str, password: str) -> str:
        await self.credentials.create_user(name, password)
        return name

    async def check_auth(self, name: str, key: str) -> bool:
        await self.authenticator.authenticate(name, key)
        return True

    async def push_progress(self, name: str, key: str, payload: ProgressPushSchema) -> ProgressAckSchema:
        """Store payload as the caller's position in payload.document.

        The owner comes from the credentials and the timestamp from the
        server clock; neither is taken from the client.
        """
        user_id = await self.authenticator.authenticate(name, key)
        record = ProgressRecord(user_id=user_id, timestamp=self.clock(), **payload.model_dump())
        await self.progress.upsert_progress(record)
        return ProgressAckSchema(document=record.document, timestamp=record.timestamp)

    async def pull_progress(self, name: str, key: str, document: str) -> ProgressRecord:
        user_id = await self.authenticator.authenticate(name, key)
        return await self.progress.get_progress(user_id, document)
