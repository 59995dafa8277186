"""Shared pytest fixtures for the create-remix-plugin test suite.

Provides reusable fixtures for:
- Answer records covering each plugin category and typing mode
- A scripted stand-in for the interactive prompts
- Temporary project directories
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from create_remix_plugin.config import ScaffoldConfig
from create_remix_plugin.scaffolder.models import AnswerRecord
from create_remix_plugin.scaffolder.prompts import QuestionStep


# ---------------------------------------------------------------------------
# Answer records
# ---------------------------------------------------------------------------


@pytest.fixture
def ui_typed_answers() -> AnswerRecord:
    """UI plugin with one slot, TypeScript."""
    return AnswerRecord(
        name="my-plugin",
        category="ui",
        slots=["app-header"],
        use_typescript=True,
    )


@pytest.fixture
def middleware_untyped_answers() -> AnswerRecord:
    """Middleware plugin with no points selected, JavaScript."""
    return AnswerRecord(
        name="my-mw",
        category="middleware",
        middleware_points=[],
        use_typescript=False,
    )


@pytest.fixture
def hybrid_typed_answers() -> AnswerRecord:
    """Hybrid plugin with slots and points, TypeScript."""
    return AnswerRecord(
        name="my-hybrid",
        category="hybrid",
        slots=["app-header", "settings-tab"],
        middleware_points=["beforeUserInput"],
        use_typescript=True,
    )


# ---------------------------------------------------------------------------
# Paths & config
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Not-yet-existing project directory inside a temp dir."""
    return tmp_path / "my-plugin"


@pytest.fixture
def scaffold_config(tmp_path: Path) -> ScaffoldConfig:
    """Config writing into the test's temp dir."""
    return ScaffoldConfig(output_dir=tmp_path)


# ---------------------------------------------------------------------------
# Scripted prompts
# ---------------------------------------------------------------------------


class ScriptedAsker:
    """Answers questions from a dict and records which keys were asked."""

    def __init__(self, replies: dict[str, Any]) -> None:
        self.replies = replies
        self.asked: list[str] = []

    async def __call__(self, step: QuestionStep) -> Any:
        self.asked.append(step.key)
        return self.replies.get(step.key)


@pytest.fixture
def scripted_asker():
    """Factory: ``scripted_asker({"name": "x", ...})`` -> ScriptedAsker."""
    return ScriptedAsker
