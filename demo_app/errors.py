"""Exceptions raised by the demo app."""
from __future__ import annotations


class DemoAppError(Exception):
    """Base class for application errors."""


class BindError(DemoAppError):
    """The listening socket could not be acquired."""

    def __init__(self, host: str, port: int, reason: OSError) -> None:
        super().__init__(f"Cannot bind {host}:{port}: {reason.strerror or reason}")
        self.host = host
        self.port = port
        self.reason = reason


class RenderError(DemoAppError):
    """A template could not be located or failed to render."""

    def __init__(self, template_name: str, message: str) -> None:
        super().__init__(f"Failed to render template {template_name!r}: {message}")
        self.template_name = template_name
