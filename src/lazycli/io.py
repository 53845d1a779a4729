"""Console I/O helpers for user-facing messages and prompts."""

from __future__ import annotations

import sys

import questionary


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def say(message: str) -> None:
    """Print a normal message to stdout.

    Args:
        message: Text to print.

    Example:
        >>> say("Hello")
        Hello
    """
    print(message)


def die(message: str, code: int = 1, *, hint: str | None = None) -> None:
    """Print an error message, an optional hint, and exit.

    Args:
        message: Error message to display.
        code: Exit code to use.
        hint: Optional follow-up lines shown after the error.

    Returns:
        None. Exits the process via ``sys.exit``.
    """
    print(f"error: {message}", file=sys.stderr)
    if hint:
        print(hint, file=sys.stderr)
    sys.exit(code)


def read_line(text: str) -> str:
    """Read one raw line of input for ``text``.

    Returns the stripped answer. End of input (or Ctrl-C inside questionary)
    aborts the command.
    """
    if _use_questionary():
        value = questionary.text(text).ask()
        if value is None:
            die("aborted")
        return str(value).strip()
    try:
        return input(f"{text} ").strip()
    except EOFError:
        die("aborted: no more input")
    return ""


def prompt(text: str, default: str | None = None, required: bool = False) -> str:
    """Prompt the user for free text, optionally enforcing a default or requirement.

    Args:
        text: Prompt label shown to the user.
        default: Value used when the user enters an empty string.
        required: When true, keep prompting until a non-empty value is provided.

    Returns:
        The user-provided or default string.

    Example:
        📦 Enter project name (no spaces) [my-app]:
    """
    while True:
        label = f"{text} [{default}]:" if default else f"{text}:"
        value = read_line(label)
        if value == "" and default:
            value = default
        if required and value == "":
            continue
        return value


def confirm(text: str, default: bool = False) -> bool:
    """Prompt for a yes/no confirmation.

    Args:
        text: Prompt label shown to the user.
        default: Answer used when the user presses enter.

    Returns:
        ``True`` when the user confirms.
    """
    if _use_questionary():
        response = questionary.confirm(text, default=default).ask()
        if response is None:
            die("aborted")
        return bool(response)
    suffix = "[Y/n]" if default else "[y/N]"
    response = read_line(f"{text} {suffix}:").lower()
    if response == "":
        return default
    return response in {"y", "yes"}
