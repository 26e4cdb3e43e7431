"""Entry point for the Posts API.

Starts the FastAPI application with uvicorn.  Host, port and log level
come from ``posts_api.app.core.config.settings`` and can be changed via
the ``API_HOST``, ``API_PORT`` and ``LOG_LEVEL`` environment variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from posts_api.app.core.config import settings
from posts_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Logging is configured by ``create_app``; keep uvicorn from replacing it.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
