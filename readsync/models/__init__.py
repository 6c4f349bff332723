from readsync.models.user import User
from readsync.models.progress import Progress, ProgressHistory

__all__ = ["User", "Progress", "ProgressHistory"]
