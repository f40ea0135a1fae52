"""Runtime configuration helpers."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "info"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL


def parse_port(raw: Optional[str], default: int = DEFAULT_PORT) -> int:
    """Return ``raw`` as a TCP port, or ``default`` when it is missing or not a valid port."""
    if raw is None or not raw.strip():
        return default
    try:
        port = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring unparseable PORT=%r, using %d", raw, default)
        return default
    if not 1 <= port <= 65535:
        logger.warning("Ignoring out-of-range PORT=%d, using %d", port, default)
        return default
    return port


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Load settings from the environment; only ``PORT`` is recognized."""
    environ = os.environ if environ is None else environ
    return Settings(port=parse_port(environ.get("PORT")))
