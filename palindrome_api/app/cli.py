"""
Command‑line entry point.

Resolves settings from flags and environment variables, configures
logging and serves the application with uvicorn.  uvicorn drains
in‑flight requests and runs the application's shutdown hooks when the
process receives SIGINT or SIGTERM.

Usage::

    palindrome-api --http-addr :8080 --strict-palindrome=false
    palindrome-api --mongo-uri mongodb://localhost:27017
"""

import asyncio
import logging
import sys
from typing import Optional, Sequence

from uvicorn import Config, Server

from .core.config import ConfigError, Settings, load_settings, split_http_addr
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)


async def serve(settings: Settings) -> None:
    """Run the API until the server is asked to stop."""
    # main builds its module-level app from the environment on import.
    from .main import create_app

    host, port = split_http_addr(settings.http_addr)
    config = Config(
        app=create_app(settings),
        host=host,
        port=port,
        reload=False,
        log_level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )
    server = Server(config)
    await server.serve()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse configuration and serve; return the process exit status."""
    try:
        settings = load_settings(argv)
    except ConfigError as exc:
        print(f"error parsing config: {exc}", file=sys.stderr)
        return 2

    setup_logging(settings.log_level)
    logger.info(
        "http-addr=%s strict-palindrome=%s store=%s",
        settings.http_addr,
        settings.strict_palindrome,
        "mongo" if settings.uses_mongo else "memory",
    )
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        pass
    return 0
