"""Shared utility functions for create-remix-plugin.

JSON output for generated files, the file-system primitives the emitter
calls, and Rich console reporting.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# JSON formatting
# ---------------------------------------------------------------------------


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* as 2-space-indented JSON with a trailing newline.

    Key order is preserved so that generated files are byte-stable.
    """
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Make *path* and any missing parents; an existing directory is fine."""
    target = Path(path)
    target.mkdir(parents=True, exist_ok=True)
    return target


def write_file(path: Path, content: str) -> None:
    """Create parent dirs and write *content*, replacing any existing file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Console reporting
# ---------------------------------------------------------------------------


def _say(style: str, message: str) -> None:
    console.print(f"[{style}]{message}[/{style}]")


def print_success(message: str) -> None:
    _say("bold green", message)


def print_error(message: str) -> None:
    _say("bold red", message)


def print_warning(message: str) -> None:
    _say("bold yellow", message)


def print_summary_table(data: dict[str, str], title: str = "Plugin scaffolded") -> None:
    """Print *data* as a field/value table followed by a blank line."""
    table = Table(title=title, header_style="bold cyan")
    table.add_column("Field", style="dim", no_wrap=True)
    table.add_column("Value")
    for field, value in data.items():
        table.add_row(field, str(value))
    console.print(table)
    console.print()
