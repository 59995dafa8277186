"""Source stub rendering.

Builds the text files of a generated plugin from the Jinja2 templates:
``src/types.ts``, ``src/index.tsx|jsx``, ``scripts/pack.js`` and
``README.md``.  The entry file is composed from per-capability fragments;
which fragments apply is decided by :func:`capabilities_for`.
"""

from __future__ import annotations

from enum import Enum

from .models import AnswerRecord, PluginCategory
from .templates import TemplateRenderer


class Capability(str, Enum):
    """A surface a plugin object exposes to the host."""

    UI = "ui"  # mount + unmount
    MIDDLEWARE = "middleware"  # process


# Fragment template per capability, in the order they appear in the stub.
_FRAGMENT_TEMPLATES: dict[Capability, str] = {
    Capability.UI: "entry/mount.j2",
    Capability.MIDDLEWARE: "entry/process.j2",
}


def capabilities_for(category: PluginCategory) -> tuple[Capability, ...]:
    """Return the capabilities a plugin of *category* implements."""
    if category is PluginCategory.UI:
        return (Capability.UI,)
    if category is PluginCategory.MIDDLEWARE:
        return (Capability.MIDDLEWARE,)
    if category is PluginCategory.HYBRID:
        return (Capability.UI, Capability.MIDDLEWARE)
    raise ValueError(f"Unknown plugin category: {category!r}")


class SourceRenderer:
    """Renders the non-JSON files of a plugin project."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def render_types(self) -> str:
        """Shared declarations followed by the plugin capability contracts."""
        shared = self.renderer.render("types/shared.ts.j2")
        contracts = self.renderer.render("types/capabilities.ts.j2")
        return f"{shared}\n{contracts}"

    def render_entry(self, answers: AnswerRecord) -> str:
        """Compose ``src/index.*`` for the answers' category and typing mode."""
        ctx = {"typescript": answers.use_typescript}
        parts = [self.renderer.render("entry/header.j2", ctx)]
        for capability in capabilities_for(answers.category):
            parts.append(self.renderer.render(_FRAGMENT_TEMPLATES[capability], ctx))
        parts.append(self.renderer.render("entry/footer.j2", ctx))
        return "".join(parts)

    def render_pack_script(self) -> str:
        """The archive builder; identical for every project."""
        return self.renderer.render("scripts/pack.js.j2")

    def render_readme(self, answers: AnswerRecord) -> str:
        return self.renderer.render("README.md.j2", {"name": answers.name})
