"""HTML rendering for the index and health pages."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Protocol, Union

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from .errors import RenderError

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
TEMPLATE_NAMES = frozenset({"index", "health"})


class Renderer(Protocol):
    def render(self, template_name: str, data: Mapping[str, Any]) -> str:
        ...


class JinjaRenderer:
    """Renders ``<name>.html`` from a template directory with HTML autoescaping."""

    def __init__(self, template_dir: Union[str, Path] = TEMPLATE_DIR) -> None:
        self.environment = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, template_name: str, data: Mapping[str, Any]) -> str:
        if template_name not in TEMPLATE_NAMES:
            raise RenderError(template_name, "unknown template")
        try:
            template = self.environment.get_template(f"{template_name}.html")
            return template.render(**data)
        except TemplateError as exc:
            raise RenderError(template_name, str(exc) or type(exc).__name__) from exc
        except Exception as exc:  # pylint: disable=broad-except
            raise RenderError(template_name, f"{type(exc).__name__}: {exc}") from exc
