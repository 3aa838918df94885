"""
Main entrypoint for the SportConnect API.

This module assembles the FastAPI application.  ``create_app`` builds
the match store and the access façade explicitly and keeps them on
``app.state``; the store is initialised (loaded or seeded) when the
application starts and flushed when it shuts down.  Run it with::

    uvicorn sportconnect_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import SnapshotStorage, SqliteSnapshotStorage
from .core.logging_config import setup_logging
from .services.api_service import MatchApi
from .services.match_store import MatchStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, storage: Optional[SnapshotStorage] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.
    storage : Optional[SnapshotStorage]
        Snapshot storage for the store.  Defaults to SQLite at
        ``settings.database_url``.

    Returns
    -------
    FastAPI
        A configured application with ``state.store`` and
        ``state.match_api`` set.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    if storage is None:
        storage = SqliteSnapshotStorage(settings.database_url, settings.storage_key)
    store = MatchStore(storage)
    match_api = MatchApi(store, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.init()
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield
        store.close()

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.store = store
    app.state.match_api = match_api

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


# Created at import time so uvicorn can discover it.
app = create_app()
