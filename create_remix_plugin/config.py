"""create-remix-plugin configuration.

Typed configuration for the scaffolder.  ``ScaffoldConfig`` holds the
run-time knobs (where to write, which choices to offer) and can be built from
environment variables.  The toolchain tables below are the static data the
planner reads: dependency versions, build commands and compiler options for
each language mode.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Language modes
# ---------------------------------------------------------------------------


class LanguageMode(str, Enum):
    """Source language of the generated plugin."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"

    @classmethod
    def for_typing(cls, use_typescript: bool) -> "LanguageMode":
        return cls.TYPESCRIPT if use_typescript else cls.JAVASCRIPT


# ---------------------------------------------------------------------------
# Fixed manifest / descriptor defaults
# ---------------------------------------------------------------------------

INITIAL_VERSION = "1.0.0"
BUNDLE_PATH = "dist/index.js"

RUNTIME_DEPENDENCIES: dict[str, str] = {
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
}

PACKAGED_FILES: tuple[str, ...] = (
    BUNDLE_PATH,
    "plugin.json",
    "README.md",
)

TSCONFIG_COMPILER_OPTIONS: dict[str, Any] = {
    "target": "es2020",
    "module": "esnext",
    "strict": True,
    "esModuleInterop": True,
    "skipLibCheck": True,
    "forceConsistentCasingInFileNames": True,
    "outDir": "./dist",
    "declaration": True,
    "jsx": "react",
    "moduleResolution": "node",
    "lib": ["dom", "dom.iterable", "esnext"],
    # esbuild does the emitting
    "noEmit": True,
}
TSCONFIG_INCLUDE: tuple[str, ...] = ("src",)
TSCONFIG_EXCLUDE: tuple[str, ...] = ("node_modules", "dist")

_ESBUILD_FLAGS = (
    "--bundle --external:react --external:react-dom "
    f"--outfile={BUNDLE_PATH} --platform=browser --format=esm"
)


# ---------------------------------------------------------------------------
# Toolchain profiles
# ---------------------------------------------------------------------------


class ToolchainProfile(BaseModel):
    """Build commands and dev dependencies for one language mode."""

    model_config = ConfigDict(frozen=True)

    entry_extension: str = Field(..., description="Extension of src/index.*")
    build_command: str
    watch_command: str
    type_check_command: str
    dev_dependencies: dict[str, str]
    emits_type_files: bool = Field(
        ..., description="Whether tsconfig.json and src/types.ts are generated"
    )


_BASE_DEV_DEPENDENCIES: dict[str, str] = {
    "esbuild": "^0.19.0",
    "adm-zip": "^0.5.10",
}

_TYPING_DEV_DEPENDENCIES: dict[str, str] = {
    "typescript": "^5.0.0",
    "@types/node": "^20.0.0",
    "@types/react": "^18.2.0",
    "@types/react-dom": "^18.2.0",
}


def _esbuild(extension: str, final_flag: str) -> str:
    return f"esbuild src/index.{extension} {_ESBUILD_FLAGS} {final_flag}"


TOOLCHAIN_PROFILES: dict[LanguageMode, ToolchainProfile] = {
    LanguageMode.TYPESCRIPT: ToolchainProfile(
        entry_extension="tsx",
        build_command=_esbuild("tsx", "--minify"),
        watch_command=_esbuild("tsx", "--watch"),
        type_check_command="tsc --noEmit",
        dev_dependencies={**_BASE_DEV_DEPENDENCIES, **_TYPING_DEV_DEPENDENCIES},
        emits_type_files=True,
    ),
    LanguageMode.JAVASCRIPT: ToolchainProfile(
        entry_extension="jsx",
        build_command=_esbuild("jsx", "--minify"),
        watch_command=_esbuild("jsx", "--watch"),
        type_check_command='echo "No type checking needed"',
        dev_dependencies=dict(_BASE_DEV_DEPENDENCIES),
        emits_type_files=False,
    ),
}


def toolchain_for(use_typescript: bool) -> ToolchainProfile:
    """Return the toolchain profile for the given typing choice."""
    return TOOLCHAIN_PROFILES[LanguageMode.for_typing(use_typescript)]


# ---------------------------------------------------------------------------
# Run-time configuration
# ---------------------------------------------------------------------------

DEFAULT_SLOT_CHOICES: tuple[str, ...] = (
    "app-header",
    "workbench-header",
    "settings-tab",
)

DEFAULT_MIDDLEWARE_POINT_CHOICES: tuple[str, ...] = (
    "beforeUserInput",
    "afterUserInput",
    "beforeAssistantOutput",
    "afterAssistantOutput",
)


class ScaffoldConfig(BaseModel):
    """Settings for one scaffolding run.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and handed to the question flow and the emitter.
    """

    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Parent directory; the project is created in <output_dir>/<name>",
    )
    default_name: str = Field(default="my-bolt-plugin", pattern=r"^[a-z0-9-]+$")
    default_use_typescript: bool = Field(default=True)
    slot_choices: list[str] = Field(default_factory=lambda: list(DEFAULT_SLOT_CHOICES))
    middleware_point_choices: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MIDDLEWARE_POINT_CHOICES)
    )

    def project_root(self, name: str) -> Path:
        """Directory the project called *name* is written to."""
        return self.output_dir / name

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            CREATE_PLUGIN_OUTPUT_DIR, CREATE_PLUGIN_DEFAULT_NAME,
            CREATE_PLUGIN_SLOTS, CREATE_PLUGIN_MIDDLEWARE_POINTS.

        The two list variables are comma-separated.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CREATE_PLUGIN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CREATE_PLUGIN_OUTPUT_DIR"])
        if os.environ.get("CREATE_PLUGIN_DEFAULT_NAME"):
            kwargs["default_name"] = os.environ["CREATE_PLUGIN_DEFAULT_NAME"]
        if os.environ.get("CREATE_PLUGIN_SLOTS"):
            kwargs["slot_choices"] = _split_csv(os.environ["CREATE_PLUGIN_SLOTS"])
        if os.environ.get("CREATE_PLUGIN_MIDDLEWARE_POINTS"):
            kwargs["middleware_point_choices"] = _split_csv(
                os.environ["CREATE_PLUGIN_MIDDLEWARE_POINTS"]
            )
        return cls(**kwargs)


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]
