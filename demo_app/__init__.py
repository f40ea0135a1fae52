"""DevOps demo web app."""
from importlib.metadata import version

from .api import create_app

__all__ = ["create_app", "__version__"]

try:
    __version__ = version("devops-demo-app")
except Exception:  # pragma: no cover - fallback when package metadata missing
    __version__ = "1.0.0"
