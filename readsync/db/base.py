"""SQLAlchemy declarative base and model imports for Alembic."""
from readsync.db.session import Base

# Import all models so Alembic and create_all can see them
from readsync.models.progress import Progress, ProgressHistory  # noqa: F401
from readsync.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Progress", "ProgressHistory"]
