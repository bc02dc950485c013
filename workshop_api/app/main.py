"""
Main entrypoint for the Workshop API.

``create_app`` assembles the FastAPI application from an explicit
``Settings`` object: it configures logging, builds the document store,
installs CORS and the error handlers, and mounts the routers.  The
store is opened and migrated in the startup hook, so a missing
workshop id or an unusable database stops the server before it accepts
traffic.

A module-level ``app`` built from the environment is provided for ASGI
servers, e.g.::

    uvicorn workshop_api.app.main:app --port 8080
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.error_handlers import register_error_handlers
from .api.router import router
from .core.config import Settings
from .core.db import DocumentStore, resolve_database_path
from .core.logging_config import setup_logging
from .core.security import ADMIN_PASSWORD_HEADER

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Read from the environment when omitted.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization", ADMIN_PASSWORD_HEADER],
        allow_credentials=True,
    )
    register_error_handlers(app)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Any exception here aborts startup before traffic is served.
        settings.validate()
        store = DocumentStore(
            resolve_database_path(settings.database_url),
            namespace=f"workshop/{settings.workshop_id}",
            timeout=settings.store_timeout,
        )
        store.init()
        app.state.store = store
        if not settings.admin_password:
            logger.warning("ADMIN_PASSWORD is not set; admin routes will answer 500")
        logger.info("%s %s started for workshop %s", settings.project_name, settings.api_version, settings.workshop_id)

    return app


app = create_app()
