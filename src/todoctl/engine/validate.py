# src/todoctl/engine/validate.py

"""
Error taxonomy and argument validation.

Every failure a command can report is a TodoError subclass; its str()
is the exact line printed by the CLI.

It does NOT perform parsing or filesystem access.
"""

from typing import Optional

from .model import Priority


# ---------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------

class TodoError(Exception):
    """
    Base class for errors reported to the user.

    Raised for flow control: commands never catch it, the CLI prints it.
    """


class MissingArgument(TodoError):
    def __init__(self, what: str) -> None:
        self.what = what
        super().__init__(f"{what} not passed")


class InvalidPriority(TodoError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__("invalid priority, choose one of: 'high', 'mid' or 'low'")


class DuplicateName(TodoError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("this task exists already")


class NotFound(TodoError):
    """
    A named task is not in any active bucket, or the document file is missing.
    """

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class _PathError(TodoError):
    """Error tied to a file, rendered as '<path>: <message>'."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class MalformedDocument(_PathError):
    """
    Raised when the document is not valid JSON or does not have the
    expected shape.
    """


class IoError(_PathError):
    """Any other read or write failure on the document file."""


class ConfigError(_PathError):
    """Invalid settings file."""


# ---------------------------------------------------------------------
# Argument checks
# ---------------------------------------------------------------------

def require_name(name: Optional[str]) -> str:
    if not name:
        raise MissingArgument("name")
    return name


def require_message(message: Optional[str]) -> str:
    if not message:
        raise MissingArgument("message")
    return message


def parse_priority(raw: str) -> Priority:
    """
    Parse a priority label.

    Only the exact lowercase labels are accepted.
    """
    try:
        return Priority(raw)
    except ValueError as e:
        raise InvalidPriority(raw) from e
