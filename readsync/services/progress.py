"""Progress store: one row per (user, document), replaced whole on every write."""
import logging

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from readsync.core.errors import StorageFailure
from readsync.models.progress import Progress, ProgressHistory
from readsync.schemas.progress import ProgressRecord

logger = logging.getLogger(__name__)


class ProgressStore:
    def __init__(self, db: AsyncSession, record_history: bool = False):
        self.db = db
        self.record_history = record_history

    async def get_progress(self, user_id: int, document: str) -> ProgressRecord:
        """Stored record, or an empty ProgressRecord when nothing was pushed yet."""
        try:
            result = await self.db.execute(
                select(Progress)
                .where(Progress.user_id == user_id, Progress.document == document)
                .execution_options(populate_existing=True)
            )
        except SQLAlchemyError as exc:
            logger.exception("progress lookup failed")
            raise StorageFailure() from exc

        row = result.scalar_one_or_none()
        if row is None:
            return ProgressRecord()
        return ProgressRecord.model_validate(row)

    async def upsert_progress(self, record: ProgressRecord) -> None:
        """Insert or overwrite every column of the (user, document) row. Last writer wins."""
        values = {
            "user": record.user_id,
            "document": record.document,
            "percentage": record.percentage,
            "progress": record.progress,
            "device": record.device,
            "device_id": record.device_id,
            "timestamp": record.timestamp,
        }
        stmt = sqlite_insert(Progress.__table__).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["user", "document"],
            set_={
                "percentage": stmt.excluded.percentage,
                "progress": stmt.excluded.progress,
                "device": stmt.excluded.device,
                "device_id": stmt.excluded.device_id,
                "timestamp": stmt.excluded.timestamp,
            },
        )
        try:
            await self.db.execute(stmt)
            if self.record_history:
                self.db.add(ProgressHistory(**record.model_dump()))
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.exception("progress write failed")
            raise StorageFailure() from exc
