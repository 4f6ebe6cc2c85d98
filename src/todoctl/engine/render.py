# src/todoctl/engine/render.py

"""
Rendering helpers for CLI output.

This module is responsible for the `ls` view: one header per bucket,
one aligned line per task, a blank line after each bucket.

It is presentation-only: it never loads or writes the document.
"""

from __future__ import annotations

import sys
from typing import Iterable, Sequence, TextIO

from .actions import Section
from .model import DONE_KEY, Priority, Task


# ---------------------------------------------------------------------
# ANSI / terminal helpers
# ---------------------------------------------------------------------

_RESET = "\033[0m"

RED = "\033[31m"
GREEN = "\033[32m"
BLUE = "\033[34m"
HI_GREEN = "\033[92m"
HI_BLUE = "\033[94m"
HI_MAGENTA = "\033[95m"
UNDERLINE = "\033[4m"

PALETTES: dict[str, tuple[str, ...]] = {
    Priority.HIGH.value: (RED, HI_MAGENTA),
    Priority.MID.value: (GREEN, HI_GREEN),
    Priority.LOW.value: (BLUE, HI_BLUE),
    DONE_KEY: (UNDERLINE,),
}

NAME_GAP = 4


def _supports_color(stream: TextIO) -> bool:
    """Return True if `stream` is a TTY."""
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def use_color(mode: str, stream: TextIO) -> bool:
    """Map a color setting (auto/always/never) to a decision for `stream`."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    return _supports_color(stream)


def paint(text: str, code: str) -> str:
    return f"{code}{text}{_RESET}"


# ---------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------

def format_tasks(tasks: Sequence[Task]) -> list[str]:
    """
    Format tasks as 'name:<pad>message'.

    Messages line up at the longest name plus four columns.
    """
    if not tasks:
        return []

    width = max(len(t.name) for t in tasks) + NAME_GAP
    return [f"{t.name}:{' ' * (width - len(t.name))}{t.message}" for t in tasks]


def render_section(header: str, tasks: Sequence[Task], palette: Sequence[str], *, color: bool) -> list[str]:
    """
    Render one bucket.

    Task i gets palette[i % len(palette)]; headers stay plain.
    """
    if not palette:
        raise ValueError("palette must not be empty")

    lines = [header]
    for i, line in enumerate(format_tasks(tasks)):
        lines.append(paint(line, palette[i % len(palette)]) if color else line)
    lines.append("")
    return lines


def print_sections(sections: Iterable[Section], *, color: bool, out: TextIO | None = None) -> None:
    stream = out if out is not None else sys.stdout
    for section in sections:
        for line in render_section(section.header, section.tasks, PALETTES[section.key], color=color):
            print(line, file=stream)
