"""CLI entrypoint for launching the demo app with Uvicorn."""
from __future__ import annotations

import locale
import logging
import sys

from .api import create_app
from .config import DEFAULT_LOG_LEVEL, load_settings
from .errors import BindError
from .server import DemoServer

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stdout,
    )


def use_environment_locale() -> None:
    """Let %c timestamps follow LANG/LC_TIME instead of the C locale."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as exc:
        logger.warning("Keeping default time locale: %s", exc)


def main() -> None:
    configure_logging(DEFAULT_LOG_LEVEL)
    use_environment_locale()
    settings = load_settings()

    server = DemoServer(create_app(settings), settings)
    try:
        server.serve()
    except BindError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        # Ctrl+C before uvicorn installed its handlers.
        logger.info("Interrupted, shutting down")
    logger.info("Server stopped")


if __name__ == "__main__":
    main()
