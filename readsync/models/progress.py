"""Progress model: the current reading position of one document for one user."""
from sqlalchemy import Column, Float, ForeignKey, Integer, String

from readsync.db.session import HISTORY_TABLE, Base


class Progress(Base):
    __tablename__ = "progress"

    user_id = Column("user", Integer, ForeignKey("users.id"), primary_key=True)
    document = Column(String, primary_key=True)  # opaque client identifier

    percentage = Column(Float, nullable=False, default=0.0)
    progress = Column(String, nullable=False, default="")  # bookmark, format owned by the client
    device = Column(String, nullable=False, default="")
    device_id = Column(String, nullable=False, default="")
    timestamp = Column(Integer, nullable=False, default=0)  # unix seconds, server clock


class ProgressHistory(Base):
    """Append-only log of accepted pushes (only written when record_history is on)."""

    __tablename__ = HISTORY_TABLE

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column("user", Integer, ForeignKey("users.id"), nullable=False, index=True)
    document = Column(String, nullable=False)
    percentage = Column(Float, nullable=False, default=0.0)
    progress = Column(String, nullable=False, default="")
    device = Column(String, nullable=False, default="")
    device_id = Column(String, nullable=False, default="")
    timestamp = Column(Integer, nullable=False, default=0)
