"""create-remix-plugin command-line entry point.

Runs the interactive flow: ask the questions, plan the project, write it
below the output directory and print the next steps.

Usage::

    create-remix-plugin
    create-remix-plugin create
    python -m create_remix_plugin --version
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from create_remix_plugin import __version__
from create_remix_plugin.config import ScaffoldConfig
from create_remix_plugin.scaffolder import (
    AnswerRecord,
    Artifact,
    CollectionCancelled,
    EmitError,
    EmitReport,
    Emitter,
    InputValidationError,
    build_question_flow,
    collect_answers,
    plan,
)
from create_remix_plugin.scaffolder.prompts import Asker, ask_with_questionary
from create_remix_plugin.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# Create command
# ---------------------------------------------------------------------------


def _report_artifact(artifact: Artifact, path: Path) -> None:
    if not artifact.is_directory:
        console.print(f"  [green]created[/green] {escape(artifact.relative_path)}")


async def run_create(
    config: ScaffoldConfig,
    ask: Asker = ask_with_questionary,
) -> tuple[AnswerRecord, EmitReport]:
    """Collect answers, then plan and write the project.

    Nothing is written if collection is cancelled or fails validation.
    """
    answers = await collect_answers(build_question_flow(config), ask=ask)
    artifacts = plan(answers)
    emitter = Emitter(on_artifact=_report_artifact)
    report = await emitter.emit(artifacts, config.project_root(answers.name))
    return answers, report


def _print_result(answers: AnswerRecord, report: EmitReport) -> None:
    console.print()
    print_summary_table(
        {
            "Plugin": answers.name,
            "Type": answers.category.value,
            "Language": "TypeScript" if answers.use_typescript else "JavaScript",
            "Location": str(report.project_root),
            "Files written": str(len(report.files)),
        },
        title="Plugin scaffolded",
    )
    print_success("Plugin scaffolding complete!")
    console.print("\nNext steps:")
    console.print(f"[cyan]1. cd {answers.name}[/cyan]")
    console.print("[cyan]2. npm install[/cyan]")
    console.print("[cyan]3. npm run build[/cyan]")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-remix-plugin",
        description="CLI to scaffold Remix plugins",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-remix-plugin\n"
            "  create-remix-plugin create\n"
            "\n"
            "Set CREATE_PLUGIN_OUTPUT_DIR to write somewhere other than the\n"
            "current directory.\n"
        ),
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("create", help="Create a new plugin (default)")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-remix-plugin``."""
    parser = build_parser()
    parser.parse_args(argv)

    try:
        config = ScaffoldConfig.from_env()
    except ValidationError as exc:
        print_error(f"Error: invalid configuration from environment:\n{escape(str(exc))}")
        sys.exit(1)

    try:
        answers, report = asyncio.run(run_create(config))
    except CollectionCancelled as exc:
        print_warning(f"Plugin creation cancelled at '{exc.field}'. Nothing was written.")
        sys.exit(1)
    except InputValidationError as exc:
        print_error(f"Error: invalid {exc.field}: {escape(exc.message)}")
        sys.exit(1)
    except EmitError as exc:
        print_error(f"Error: could not write {escape(str(exc.path))}: {escape(str(exc.cause))}")
        print_warning("Files written before the failure were left in place.")
        sys.exit(1)

    _print_result(answers, report)


if __name__ == "__main__":
    main()
