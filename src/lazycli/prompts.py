"""Interactive prompt sequencing.

Questions are asked strictly in table order. Invalid input repeats the same
question. The skip token (``-1``) stops the sequence and cancels the whole
scaffolding operation by raising ``SetupCancelled``.
"""

from __future__ import annotations

from collections.abc import Iterable

from . import io, log
from .errors import SetupCancelled, UsageError
from .models import Answer, AnswerSet, Menu, Question

SMART_STACK_TITLE = "🧠 LazyCLI Smart Stack Setup"
SMART_STACK_SUBTITLE = "1 = Yes, 0 = No, -1 = Cancel setup"


def ask(question: Question) -> Answer:
    """Ask one question until a valid token is entered."""
    while True:
        raw = io.read_line(f"{question.text} {question.hint()}:")
        answer = question.tokens.get(raw.strip().lower())
        if answer is not None:
            return answer
        log.warning(f"⚠️ Please enter {', '.join(question.accepted())}.")


def ask_sequence(
    questions: Iterable[Question], answers: AnswerSet | None = None
) -> AnswerSet:
    """Ask ``questions`` in order and return the collected answers.

    Conditional questions whose predicate is false are skipped. The first
    ``Answer.SKIP`` stops prompting immediately.

    Raises:
        SetupCancelled: The user entered the skip token.
    """
    collected = answers if answers is not None else AnswerSet()
    for question in questions:
        if question.when is not None and not question.when(collected):
            continue
        answer = ask(question)
        if answer is Answer.SKIP:
            raise SetupCancelled(answered=len(collected))
        collected.record(question.key, answer)
    return collected


def choose(menu: Menu) -> str:
    """Show a numbered menu and return the selected option value."""
    log.info(menu.text + ":")
    for index, (_, label) in enumerate(menu.options, start=1):
        log.info(f"{index}) {label}")
    tokens = {str(index): value for index, (value, _) in enumerate(menu.options, start=1)}
    while True:
        raw = io.read_line(f"👉 Enter choice [1-{len(menu.options)}]:")
        value = tokens.get(raw.strip())
        if value is not None:
            return value
        log.warning(f"⚠️ Please enter a number between 1 and {len(menu.options)}.")


def project_name(given: str | None, *, usage: str) -> str:
    """Return the project name from the argument or an interactive prompt.

    Raises:
        UsageError: The name is empty or contains whitespace.
    """
    name = (given or "").strip()
    if not name:
        name = io.prompt("📦 Enter project name (no spaces)")
    if not name:
        raise UsageError("Project name cannot be empty.", usage=usage)
    if any(char.isspace() for char in name):
        raise UsageError(f"Project name cannot contain spaces: {name!r}", usage=usage)
    return name
