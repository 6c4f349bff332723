"""readsync - FastAPI app entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from readsync.core.config import Settings, get_settings
from readsync.core.logs import AccessLogMiddleware, AccessObserver, log_access
from readsync.db import base  # noqa: F401  registers models on Base.metadata
from readsync.db.session import Database
from readsync.routers import syncs, users
from readsync.routers.errors import register_exception_handlers


def create_app(settings: Settings | None = None, access_observer: AccessObserver = log_access) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(
            settings.database_url,
            timeout=settings.database_timeout,
            record_history=settings.record_history,
        )
        database.open()
        await database.create_tables()
        app.state.database = database
        try:
            yield
        finally:
            await database.close()

    app = FastAPI(
        title=settings.app_name,
        description="Reading progress sync server (KOReader sync protocol)",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(AccessLogMiddleware, observer=access_observer)
    register_exception_handlers(app)

    app.include_router(users.router)
    app.include_router(syncs.router)

    @app.get("/healthcheck")
    async def healthcheck():
        return {"state": "OK"}

    return app


app = create_app()
