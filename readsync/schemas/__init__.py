from readsync.schemas.decode import decode_body
from readsync.schemas.progress import ProgressAckSchema, ProgressPushSchema, ProgressRecord
from readsync.schemas.user import UserCreateSchema

__all__ = [
    "decode_body",
    "ProgressAckSchema",
    "ProgressPushSchema",
    "ProgressRecord",
    "UserCreateSchema",
]
