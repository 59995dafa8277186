"""Artifact emission.

Writes a planned artifact list to disk, strictly in order.  The first failing
file operation stops the run: earlier writes are kept and later artifacts
are never attempted.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, Field

from ..utils import ensure_dir, write_file
from .models import Artifact


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class EmitError(Exception):
    """Raised when a directory or file cannot be written."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


class EmitReport(BaseModel):
    """What an emit run produced."""

    project_root: Path
    directories: list[Path] = Field(default_factory=list)
    files: list[Path] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.directories) + len(self.files)


# ---------------------------------------------------------------------------
# Emitter
# ---------------------------------------------------------------------------

MakeDir = Callable[[Path], object]
WriteFile = Callable[[Path, str], object]
ArtifactCallback = Callable[[Artifact, Path], None]


class Emitter:
    """Writes artifacts below a project root.

    The file-system primitives are injectable so callers (and tests) can
    substitute their own.  Each primitive runs in a worker thread and is
    awaited before the next one starts.
    """

    def __init__(
        self,
        make_dir: MakeDir = ensure_dir,
        write_file: WriteFile = write_file,
        on_artifact: ArtifactCallback | None = None,
    ) -> None:
        self.make_dir = make_dir
        self.write_file = write_file
        self.on_artifact = on_artifact

    async def emit(self, artifacts: list[Artifact], target_root: str | Path) -> EmitReport:
        """Write *artifacts* below *target_root*.

        Existing files are overwritten without prompting.

        Raises:
            EmitError: On the first failing directory or file operation.
        """
        root = Path(target_root)
        report = EmitReport(project_root=root)

        for artifact in artifacts:
            path = resolve_artifact_path(root, artifact)
            try:
                if artifact.is_directory:
                    await asyncio.to_thread(self.make_dir, path)
                else:
                    await asyncio.to_thread(self.write_file, path, artifact.content)
            except OSError as exc:
                raise EmitError(path, exc) from exc

            if artifact.is_directory:
                report.directories.append(path)
            else:
                report.files.append(path)
            if self.on_artifact is not None:
                self.on_artifact(artifact, path)

        return report


def resolve_artifact_path(root: Path, artifact: Artifact) -> Path:
    """Map an artifact's POSIX relative path onto *root*.

    Raises:
        ValueError: If the path is absolute or escapes *root*.
    """
    rel = PurePosixPath(artifact.relative_path)
    if rel.is_absolute() or ".." in rel.parts:
        raise ValueError(f"Artifact path must stay inside the project: {rel}")
    return root.joinpath(*rel.parts) if rel.parts else root
