"""Pydantic schemas for progress push/pull."""
from pydantic import BaseModel, ConfigDict


class ProgressPushSchema(BaseModel):
    """Body of PUT /syncs/progress. Client-sent timestamp/user keys are ignored."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    document: str
    percentage: float = 0.0
    progress: str = ""
    device: str = ""
    device_id: str = ""


class ProgressAckSchema(BaseModel):
    document: str
    timestamp: int


class ProgressRecord(BaseModel):
    """One stored progress row. A record with every field at its default is the empty result."""

    user_id: int = 0
    document: str = ""
    percentage: float = 0.0
    progress: str = ""
    device: str = ""
    device_id: str = ""
    timestamp: int = 0

    class Config:
        from_attributes = True

    def is_empty(self) -> bool:
        return not self.document

    def to_wire(self) -> dict:
        """Client view: no user id, zero-valued fields omitted."""
        return self.model_dump(exclude={"user_id"}, exclude_defaults=True)
