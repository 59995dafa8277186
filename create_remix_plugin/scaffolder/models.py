"""Pydantic models for plugin scaffolding.

``AnswerRecord`` is the validated input to planning.  The remaining models
are derived records that map one-to-one onto generated JSON files
(``plugin.json``, ``package.json``, ``tsconfig.json``) and the ``Artifact``
type the planner hands to the emitter.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

PLUGIN_NAME_PATTERN = r"^[a-z0-9-]+$"
PLUGIN_NAME_HINT = "Name must contain only lowercase letters, numbers, and dashes"


def validate_plugin_name(value: str) -> bool | str:
    """Return ``True`` for a valid plugin name, otherwise the error message.

    The return shape matches what questionary expects from a ``validate``
    callable, so the same function drives re-prompting.
    """
    if re.match(PLUGIN_NAME_PATTERN, value or ""):
        return True
    return PLUGIN_NAME_HINT


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class PluginCategory(str, Enum):
    UI = "ui"
    MIDDLEWARE = "middleware"
    HYBRID = "hybrid"

    @property
    def has_ui(self) -> bool:
        """UI-capable categories render into slots."""
        return self is not PluginCategory.MIDDLEWARE

    @property
    def has_middleware(self) -> bool:
        """Middleware-capable categories intercept pipeline points."""
        return self is not PluginCategory.UI


# ---------------------------------------------------------------------------
# Answer record
# ---------------------------------------------------------------------------


class AnswerRecord(BaseModel):
    """The answers that fully determine a generated project.

    ``slots`` is present iff the category is UI-capable and
    ``middleware_points`` iff it is middleware-capable.  A missing list for
    a capable category is normalised to an empty tuple; duplicates are
    dropped in first-seen order.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=PLUGIN_NAME_PATTERN)
    category: PluginCategory
    slots: Optional[tuple[str, ...]] = None
    middleware_points: Optional[tuple[str, ...]] = None
    use_typescript: bool = True

    @model_validator(mode="before")
    @classmethod
    def _normalise_capability_lists(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        try:
            category = PluginCategory(data.get("category"))
        except ValueError:
            # Let field validation report the bad category.
            return data
        for key, capable in (
            ("slots", category.has_ui),
            ("middleware_points", category.has_middleware),
        ):
            value = data.get(key)
            if capable and value is None:
                data[key] = ()
            elif value is not None:
                data[key] = tuple(dict.fromkeys(value))
        return data

    @model_validator(mode="after")
    def _check_capability_lists(self) -> "AnswerRecord":
        if not self.category.has_ui and self.slots is not None:
            raise ValueError("slots are only allowed for ui and hybrid plugins")
        if not self.category.has_middleware and self.middleware_points is not None:
            raise ValueError(
                "middleware_points are only allowed for middleware and hybrid plugins"
            )
        return self


# ---------------------------------------------------------------------------
# Derived records
# ---------------------------------------------------------------------------


class _JsonRecord(BaseModel):
    """Base for records serialised with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Return the file payload: camelCase keys, absent fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ManifestRecord(_JsonRecord):
    """Contents of ``plugin.json``."""

    id: str
    version: str
    type: PluginCategory
    entry_point: str
    permissions: list[str] = Field(default_factory=list)
    slots: Optional[list[str]] = None
    middleware_points: Optional[list[str]] = None


class BuildScripts(_JsonRecord):
    build: str
    watch: str
    type_check: str = Field(..., alias="type-check")
    prepack: str
    pack: str


class BuildDescriptor(_JsonRecord):
    """Contents of ``package.json``."""

    name: str
    version: str
    main: str
    scripts: BuildScripts
    dependencies: dict[str, str]
    dev_dependencies: dict[str, str]
    files: list[str]


class TypeCheckConfig(BaseModel):
    """Contents of ``tsconfig.json``.

    Compiler option keys are already in their on-disk spelling.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    compiler_options: dict[str, Any] = Field(..., alias="compilerOptions")
    include: list[str]
    exclude: list[str]

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ---------------------------------------------------------------------------
# Artifact
# ---------------------------------------------------------------------------


class Artifact(BaseModel):
    """One planned write, relative to the project root.

    ``relative_path`` is POSIX-style; ``"."`` denotes the project root
    itself.  Directory hints carry no content.
    """

    model_config = ConfigDict(frozen=True)

    relative_path: str
    content: str = ""
    is_directory: bool = False

    @classmethod
    def directory(cls, relative_path: str) -> "Artifact":
        return cls(relative_path=relative_path, is_directory=True)

    @classmethod
    def file(cls, relative_path: str, content: str) -> "Artifact":
        return cls(relative_path=relative_path, content=content)
