"""Artifact planning.

Maps an ``AnswerRecord`` to the ordered list of directories and files that
make up a new plugin project.  Planning is pure: no file-system access, and
identical answers always produce identical artifacts, byte for byte.
"""

from __future__ import annotations

from ..config import (
    BUNDLE_PATH,
    INITIAL_VERSION,
    PACKAGED_FILES,
    RUNTIME_DEPENDENCIES,
    TSCONFIG_COMPILER_OPTIONS,
    TSCONFIG_EXCLUDE,
    TSCONFIG_INCLUDE,
    ToolchainProfile,
    toolchain_for,
)
from ..utils import dump_json
from .models import (
    AnswerRecord,
    Artifact,
    BuildDescriptor,
    BuildScripts,
    ManifestRecord,
    TypeCheckConfig,
)
from .sources import SourceRenderer


# ---------------------------------------------------------------------------
# Fixed paths inside a generated project
# ---------------------------------------------------------------------------

PROJECT_ROOT = "."
SOURCE_DIR = "src"
MANIFEST_PATH = "plugin.json"
PACK_SCRIPT_PATH = "scripts/pack.js"
README_PATH = "README.md"
BUILD_DESCRIPTOR_PATH = "package.json"
TYPE_CHECK_CONFIG_PATH = "tsconfig.json"
TYPES_PATH = f"{SOURCE_DIR}/types.ts"


# ---------------------------------------------------------------------------
# Derived records
# ---------------------------------------------------------------------------


def build_manifest(answers: AnswerRecord) -> ManifestRecord:
    """Derive ``plugin.json`` from the answers."""
    return ManifestRecord(
        id=answers.name,
        version=INITIAL_VERSION,
        type=answers.category,
        entry_point=BUNDLE_PATH,
        permissions=[],
        slots=list(answers.slots) if answers.slots is not None else None,
        middleware_points=(
            list(answers.middleware_points)
            if answers.middleware_points is not None
            else None
        ),
    )


def build_descriptor(answers: AnswerRecord) -> BuildDescriptor:
    """Derive ``package.json`` from the answers."""
    profile = toolchain_for(answers.use_typescript)
    return BuildDescriptor(
        name=answers.name,
        version=INITIAL_VERSION,
        main=BUNDLE_PATH,
        scripts=BuildScripts(
            build=profile.build_command,
            watch=profile.watch_command,
            type_check=profile.type_check_command,
            prepack="npm run build",
            pack=f"node {PACK_SCRIPT_PATH}",
        ),
        dependencies=dict(RUNTIME_DEPENDENCIES),
        dev_dependencies=dict(profile.dev_dependencies),
        files=list(PACKAGED_FILES),
    )


def build_type_check_config() -> TypeCheckConfig:
    """The fixed ``tsconfig.json`` for typed projects."""
    return TypeCheckConfig(
        compiler_options=dict(TSCONFIG_COMPILER_OPTIONS),
        include=list(TSCONFIG_INCLUDE),
        exclude=list(TSCONFIG_EXCLUDE),
    )


def entry_path(profile: ToolchainProfile) -> str:
    return f"{SOURCE_DIR}/index.{profile.entry_extension}"


# ---------------------------------------------------------------------------
# Planner
# ---------------------------------------------------------------------------


class ArtifactPlanner:
    """Computes the artifacts for a plugin project.

    The order is fixed: project root, ``src/``, ``plugin.json``,
    ``scripts/pack.js``, ``README.md``, ``package.json``, then for typed
    projects ``tsconfig.json`` and ``src/types.ts``, and finally the entry
    stub.
    """

    def __init__(self, sources: SourceRenderer | None = None) -> None:
        self.sources = sources or SourceRenderer()

    def plan(self, answers: AnswerRecord) -> list[Artifact]:
        profile = toolchain_for(answers.use_typescript)

        artifacts = [
            Artifact.directory(PROJECT_ROOT),
            Artifact.directory(SOURCE_DIR),
            Artifact.file(MANIFEST_PATH, dump_json(build_manifest(answers).to_json_dict())),
            Artifact.file(PACK_SCRIPT_PATH, self.sources.render_pack_script()),
            Artifact.file(README_PATH, self.sources.render_readme(answers)),
            Artifact.file(
                BUILD_DESCRIPTOR_PATH,
                dump_json(build_descriptor(answers).to_json_dict()),
            ),
        ]

        if profile.emits_type_files:
            artifacts.append(
                Artifact.file(
                    TYPE_CHECK_CONFIG_PATH,
                    dump_json(build_type_check_config().to_json_dict()),
                )
            )
            artifacts.append(Artifact.file(TYPES_PATH, self.sources.render_types()))

        artifacts.append(
            Artifact.file(entry_path(profile), self.sources.render_entry(answers))
        )
        return artifacts


def plan(answers: AnswerRecord) -> list[Artifact]:
    """Plan a project with the default templates."""
    return ArtifactPlanner().plan(answers)


def file_artifacts(artifacts: list[Artifact]) -> list[Artifact]:
    """Drop directory hints, keeping the files in order."""
    return [a for a in artifacts if not a.is_directory]
