"""Add progress_history (append-only push log).

Only created when RECORD_HISTORY is on, so the default database keeps
just users and progress. Enabling it later creates the table at startup.

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from readsync.core.config import get_settings

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    if not get_settings().record_history:
        return

    op.create_table(
        "progress_history",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user", sa.Integer(), nullable=False),
        sa.Column("document", sa.String(), nullable=False),
        sa.Column("percentage", sa.Float(), nullable=False),
        sa.Column("progress", sa.String(), nullable=False),
        sa.Column("device", sa.String(), nullable=False),
        sa.Column("device_id", sa.String(), nullable=False),
        sa.Column("timestamp", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["user"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_progress_history_user"), "progress_history", ["user"], unique=False)


def downgrade() -> None:
    if "progress_history" not in sa.inspect(op.get_bind()).get_table_names():
        return
    op.drop_index(op.f("ix_progress_history_user"), table_name="progress_history")
    op.drop_table("progress_history")
