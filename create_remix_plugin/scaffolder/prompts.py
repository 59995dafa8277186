"""Interactive answer collection.

The question flow is a fixed sequence of ``QuestionStep``s.  Each step has a
``when`` predicate over the answers gathered so far; steps whose predicate
is false are skipped.  A ``None`` answer means the user aborted, which ends
the flow before anything is planned or written.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import questionary
from pydantic import ValidationError

from ..config import ScaffoldConfig
from .models import AnswerRecord, PluginCategory, validate_plugin_name


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class CollectionCancelled(Exception):
    """Raised when the user aborts while answering *field*."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Cancelled while answering '{field}'")


class InputValidationError(Exception):
    """Raised when a collected answer is not acceptable."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"Invalid value for '{field}': {message}")


# ---------------------------------------------------------------------------
# Question steps
# ---------------------------------------------------------------------------


class QuestionKind(str, Enum):
    TEXT = "text"
    SELECT = "select"
    CHECKBOX = "checkbox"
    CONFIRM = "confirm"


Answers = dict[str, Any]


def _always(_: Answers) -> bool:
    return True


@dataclass(frozen=True)
class QuestionStep:
    """One state of the question flow."""

    key: str
    message: str
    kind: QuestionKind
    choices: tuple[str, ...] = ()
    default: Any = None
    validate: Optional[Callable[[Any], bool | str]] = None
    when: Callable[[Answers], bool] = _always

    def applies(self, answers: Answers) -> bool:
        return self.when(answers)


def _wants_ui(answers: Answers) -> bool:
    return PluginCategory(answers["category"]).has_ui


def _wants_middleware(answers: Answers) -> bool:
    return PluginCategory(answers["category"]).has_middleware


def _validate_category(value: Any) -> bool | str:
    if value in {c.value for c in PluginCategory}:
        return True
    return "Plugin type must be one of: " + ", ".join(c.value for c in PluginCategory)


def build_question_flow(config: ScaffoldConfig | None = None) -> list[QuestionStep]:
    """Return the question sequence: name, category, slots, points, typing."""
    config = config or ScaffoldConfig()
    return [
        QuestionStep(
            key="name",
            message="Plugin name:",
            kind=QuestionKind.TEXT,
            default=config.default_name,
            validate=validate_plugin_name,
        ),
        QuestionStep(
            key="category",
            message="Plugin type:",
            kind=QuestionKind.SELECT,
            choices=tuple(c.value for c in PluginCategory),
            validate=_validate_category,
        ),
        QuestionStep(
            key="slots",
            message="Select UI slots (if applicable):",
            kind=QuestionKind.CHECKBOX,
            choices=tuple(config.slot_choices),
            when=_wants_ui,
        ),
        QuestionStep(
            key="middleware_points",
            message="Select middleware points (if applicable):",
            kind=QuestionKind.CHECKBOX,
            choices=tuple(config.middleware_point_choices),
            when=_wants_middleware,
        ),
        QuestionStep(
            key="use_typescript",
            message="Use TypeScript?",
            kind=QuestionKind.CONFIRM,
            default=config.default_use_typescript,
        ),
    ]


# ---------------------------------------------------------------------------
# Asking
# ---------------------------------------------------------------------------

Asker = Callable[[QuestionStep], Awaitable[Any]]


def make_question(step: QuestionStep) -> questionary.Question:
    """Build the questionary prompt for *step*."""
    if step.kind is QuestionKind.TEXT:
        return questionary.text(
            step.message,
            default=step.default or "",
            validate=step.validate,
        )
    if step.kind is QuestionKind.SELECT:
        return questionary.select(step.message, choices=list(step.choices))
    if step.kind is QuestionKind.CHECKBOX:
        return questionary.checkbox(step.message, choices=list(step.choices))
    if step.kind is QuestionKind.CONFIRM:
        return questionary.confirm(step.message, default=bool(step.default))
    raise ValueError(f"Unsupported question kind: {step.kind!r}")


async def ask_with_questionary(step: QuestionStep) -> Any:
    """Ask *step* on the terminal; returns ``None`` on Ctrl-C."""
    return await make_question(step).ask_async()


async def collect_answers(
    flow: list[QuestionStep] | None = None,
    ask: Asker = ask_with_questionary,
) -> AnswerRecord:
    """Walk the question flow and return the validated answers.

    Raises:
        CollectionCancelled: If any visited question returns ``None``.
        InputValidationError: If an answer fails validation.
    """
    flow = flow if flow is not None else build_question_flow()
    answers: Answers = {}

    for step in flow:
        if not step.applies(answers):
            continue
        value = await ask(step)
        if value is None:
            raise CollectionCancelled(step.key)
        if step.validate is not None:
            verdict = step.validate(value)
            if verdict is not True:
                raise InputValidationError(step.key, str(verdict))
        answers[step.key] = value

    try:
        return AnswerRecord.model_validate(answers)
    except ValidationError as exc:
        first = exc.errors()[0]
        loc = ".".join(str(part) for part in first["loc"]) or "answers"
        raise InputValidationError(loc, first["msg"]) from exc
