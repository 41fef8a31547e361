"""Operator-facing output and interactive confirmation.

Status goes to stdout, diagnostics to stderr. ANSI colors are used only when
the stream is a TTY and ``NO_COLOR`` is unset.
"""

from __future__ import annotations

import os
import sys
from typing import Callable, TextIO

Confirm = Callable[[str], bool]

GREEN = "\033[0;32m"
BLUE = "\033[0;34m"
YELLOW = "\033[1;33m"
RED = "\033[0;31m"
RESET = "\033[0m"


def use_color(stream: TextIO) -> bool:
    if os.getenv("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def paint(text: str, color: str, stream: TextIO) -> str:
    if not use_color(stream):
        return text
    return f"{color}{text}{RESET}"


def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)


def info(message: str) -> None:
    print(paint(message, BLUE, sys.stdout))


def success(message: str) -> None:
    print(paint(f"✓ {message}", GREEN, sys.stdout))


def notice(message: str) -> None:
    print(paint(message, YELLOW, sys.stdout))


def error(message: str, hint: str | None = None) -> None:
    eprint(paint(f"Error: {message}", RED, sys.stderr))
    if hint:
        eprint(hint)


def prompt_confirm(question: str) -> bool:
    # closed stdin (piped/CI) counts as "no"
    try:
        resp = input(f"{question} (y/n) ").strip().lower()
    except EOFError:
        print()
        return False
    return resp in ("y", "yes")


def assume_yes(question: str) -> bool:
    print(f"{question} (y/n) y")
    return True
