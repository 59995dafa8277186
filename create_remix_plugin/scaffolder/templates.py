"""Jinja2 environment for the bundled plugin templates.

Templates live next to this module under ``templates/`` and render source
files (TypeScript, JavaScript, Markdown), so HTML autoescaping is off and a
missing variable is an error rather than empty text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

_BUNDLED_TEMPLATES = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Loads and renders ``.j2`` templates from one directory."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir or _BUNDLED_TEMPLATES)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any] | None = None) -> str:
        """Render *template_path* (relative, e.g. ``"entry/header.j2"``)."""
        return self.env.get_template(template_path).render(**(context or {}))

    def list_templates(self, prefix: str = "") -> list[str]:
        """Sorted template names, optionally limited to one subdirectory."""
        names = self.env.list_templates(extensions=["j2"])
        if not prefix:
            return sorted(names)
        folder = prefix.rstrip("/") + "/"
        return sorted(n for n in names if n.startswith(folder))
