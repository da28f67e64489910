"""Entry point for the Catalog API server.

Launches the FastAPI application with uvicorn.  Host, port and log
level come from the same environment variables as the application
settings (``HOST``, ``PORT``, ``LOG_LEVEL``); see
``catalog_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from catalog_api.app.core.config import settings


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app="catalog_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Catalog API stopped")


if __name__ == "__main__":
    main()
