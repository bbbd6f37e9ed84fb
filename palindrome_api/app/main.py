"""
Main entrypoint for the Palindrome Message API.

This module assembles the FastAPI application: it sets up logging,
registers exception handlers, includes the health check and the
versioned routers, and wires the message service to a storage backend.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app`` so it can be served
directly, e.g.::

    uvicorn palindrome_api.app.main:app

When no store is passed to ``create_app`` one is built from the
settings on startup and closed again on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.health import router as health_router
from .api.v1.router import router as v1_router
from .core.config import Settings
from .core.db import build_store
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.message_service import MessageService
from .store import MessageStore


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[MessageStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; read from the environment when omitted.
    store : Optional[MessageStore]
        Storage backend to use.  If omitted, the backend selected by
        ``settings`` is created when the application starts.  A store
        passed in here is owned by the caller and is not closed.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned_store = None
        if getattr(app.state, "message_service", None) is None:
            owned_store = build_store(settings)
            app.state.message_service = MessageService(owned_store, settings.strict_palindrome)
        try:
            yield
        finally:
            if owned_store is not None:
                owned_store.close()
                app.state.message_service = None

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.message_service = None
    if store is not None:
        app.state.message_service = MessageService(store, settings.strict_palindrome)

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")
    return app


# Create the application instance at import time so that ASGI servers
# can discover it without calling create_app manually.
app = create_app()
