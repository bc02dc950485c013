"""Entry point for the workshop API server.

Reads configuration from the environment (see
``workshop_api.app.core.config.Settings``), builds the application and
serves it with Uvicorn.  Uvicorn handles SIGINT/SIGTERM and shuts the
server down gracefully.

Usage:
    WORKSHOP_ID=2025 ADMIN_PASSWORD=secret python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from workshop_api.app.core.config import Settings
from workshop_api.app.main import create_app


async def main() -> None:
    """Build the app from the environment and serve it until stopped."""
    settings = Settings.from_env()
    app = create_app(settings)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Starting server on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
