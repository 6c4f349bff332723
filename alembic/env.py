"""Alembic env for the readsync SQLite store.

The app talks to SQLite through aiosqlite; migrations run on the plain
sqlite driver against the same file.
"""
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from readsync.core.config import get_settings  # noqa: E402
from readsync.db.base import Base  # noqa: E402

target_metadata = Base.metadata


def get_url() -> str:
    """DATABASE_URL from settings (alembic.ini only as fallback), on the sync driver."""
    url = get_settings().database_url or config.get_main_option("sqlalchemy.url")
    return url.replace("sqlite+aiosqlite://", "sqlite://", 1)


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        render_as_batch=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    section = config.get_section(config.config_ini_section) or {}
    section["sqlalchemy.url"] = get_url()
    engine = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    with engine.connect() as connection:
        # sqlite cannot ALTER most things in place; batch mode rebuilds tables
        context.configure(connection=connection, target_metadata=target_metadata, render_as_batch=True)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
