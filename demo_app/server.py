"""Listening socket and uvicorn lifecycle for the demo app."""
from __future__ import annotations

import contextlib
import enum
import logging
import signal
import socket
import threading
from typing import Generator, Optional

import uvicorn
from fastapi import FastAPI
from uvicorn.server import HANDLED_SIGNALS

from .config import Settings
from .errors import BindError

logger = logging.getLogger(__name__)


class ServerState(str, enum.Enum):
    STARTING = "starting"
    SERVING = "serving"


class GracefulServer(uvicorn.Server):
    """uvicorn server whose SIGINT/SIGTERM handling ends in a normal return from ``run()``.

    The stock server raises the captured signal again after shutdown.
    """

    @contextlib.contextmanager
    def capture_signals(self) -> Generator[None, None, None]:
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        original_handlers = {sig: signal.signal(sig, self.handle_exit) for sig in HANDLED_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in original_handlers.items():
                signal.signal(sig, handler)


class DemoServer:
    """Binds the configured port up front, then hands the socket to uvicorn."""

    def __init__(self, app: FastAPI, settings: Settings) -> None:
        self.app = app
        self.settings = settings
        self.state = ServerState.STARTING
        self.socket: Optional[socket.socket] = None
        self.uvicorn_server: Optional[GracefulServer] = None

    def bind(self) -> socket.socket:
        """Acquire the listening socket; raises ``BindError`` if the port is unavailable."""
        if self.socket is not None:
            return self.socket

        family = socket.AF_INET6 if ":" in self.settings.host else socket.AF_INET
        sock = socket.socket(family, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self.settings.host, self.settings.port))
            sock.listen()
        except OSError as exc:
            sock.close()
            raise BindError(self.settings.host, self.settings.port, exc) from exc
        sock.set_inheritable(True)

        self.socket = sock
        self.state = ServerState.SERVING
        port = self.settings.port
        logger.info("🚀 AWS DevOps Demo App running on port %d", port)
        logger.info("📱 Home: http://localhost:%d", port)
        logger.info("💚 Health: http://localhost:%d/health", port)
        return sock

    def serve(self) -> None:
        """Run until uvicorn is stopped by a signal."""
        sock = self.bind()
        config = uvicorn.Config(
            self.app,
            log_level=self.settings.log_level,
            log_config=None,
        )
        self.uvicorn_server = GracefulServer(config)
        try:
            self.uvicorn_server.run(sockets=[sock])
        finally:
            self.close()

    def stop(self) -> None:
        """Ask a running server to shut down gracefully."""
        if self.uvicorn_server is not None:
            self.uvicorn_server.should_exit = True

    def close(self) -> None:
        if self.socket is not None:
            self.socket.close()
            self.socket = None
