"""Jinja2 environment wrapper used as the template substitution collaborator."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class TemplateRenderer:
    """Render named templates from a directory with a mapping of variables.

    Variables a template references but the caller omits render as empty
    strings, so optional context never fails a build.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )

    def render(self, name: str, /, **context: typ.Any) -> str:
        """Render the template ``name`` with ``context``."""
        return self.env.get_template(name).render(**context)


__all__ = ["DEFAULT_TEMPLATES_DIR", "TemplateRenderer"]
