"""Entry point for the Garage Records API.

Serves ``garage_api.app.main:app`` with Uvicorn.  Host, port, storage
backend and log level are read from environment variables (see
``garage_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from garage_api.app.core.config import settings
from garage_api.app.main import app


async def main() -> None:
    """Run the API server until it is stopped."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
