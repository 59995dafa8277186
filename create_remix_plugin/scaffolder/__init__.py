"""Plugin scaffolder -- turns answers into a ready-to-build plugin project.

Takes an ``AnswerRecord`` and produces a project directory containing
``plugin.json``, ``package.json``, an optional ``tsconfig.json``, the
``scripts/pack.js`` archive builder, a README and the ``src/`` stubs.

Quick usage::

    from create_remix_plugin.scaffolder import AnswerRecord, Emitter, plan

    answers = AnswerRecord(
        name="my-plugin",
        category="ui",
        slots=["app-header"],
        use_typescript=True,
    )
    report = await Emitter().emit(plan(answers), "/tmp/my-plugin")
"""

from create_remix_plugin.scaffolder.emitter import EmitError, EmitReport, Emitter
from create_remix_plugin.scaffolder.models import (
    AnswerRecord,
    Artifact,
    PluginCategory,
)
from create_remix_plugin.scaffolder.planner import ArtifactPlanner, file_artifacts, plan
from create_remix_plugin.scaffolder.prompts import (
    CollectionCancelled,
    InputValidationError,
    build_question_flow,
    collect_answers,
)

__all__ = [
    "AnswerRecord",
    "Artifact",
    "ArtifactPlanner",
    "CollectionCancelled",
    "EmitError",
    "EmitReport",
    "Emitter",
    "InputValidationError",
    "PluginCategory",
    "build_question_flow",
    "collect_answers",
    "file_artifacts",
    "plan",
]
