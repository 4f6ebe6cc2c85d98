# src/todoctl/engine/codec.py

"""
Task document codec.

Converts a Document to and from the persisted JSON form:

    {
        "high": [{"name": "...", "message": "..."}, ...],
        "mid": [...],
        "low": [...],
        "done": [...]
    }

This module performs structural checks only; it never touches the
filesystem. `path` arguments are used for error messages.
"""

import json
from typing import Any, Final

from .model import BUCKET_KEYS, Document, Task
from .validate import MalformedDocument


INDENT: Final[int] = 4
ENCODING: Final[str] = "utf-8"


# ---------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------

def encode(doc: Document) -> bytes:
    """
    Serialise a document.

    All four buckets are always written, in fixed order, and each task
    carries exactly `name` then `message`.
    """
    data = {
        key: [{"name": t.name, "message": t.message} for t in doc.bucket(key)]
        for key in BUCKET_KEYS
    }
    text = json.dumps(data, indent=INDENT, ensure_ascii=False)
    return (text + "\n").encode(ENCODING)


# ---------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------

def decode(raw: bytes, *, path: str = "<document>") -> Document:
    """
    Parse a document.

    Missing buckets (or null ones) decode as empty; unknown top-level and
    per-task keys are ignored.
    """
    try:
        data = json.loads(raw.decode(ENCODING))
    except (UnicodeDecodeError, ValueError) as e:
        raise MalformedDocument(path, f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedDocument(path, "JSON root must be an object")

    doc = Document()
    for key in BUCKET_KEYS:
        doc.bucket(key).extend(_parse_bucket(path, key, data.get(key)))
    return doc


def _parse_bucket(path: str, key: str, raw: Any) -> list[Task]:
    if raw is None:
        return []

    if not isinstance(raw, list):
        raise MalformedDocument(path, f"'{key}' must be a list of tasks")

    return [_parse_task(path, key, i, item) for i, item in enumerate(raw)]


def _parse_task(path: str, key: str, idx: int, item: Any) -> Task:
    if not isinstance(item, dict):
        raise MalformedDocument(path, f"{key}[{idx}] must be an object")

    return Task(
        name=_str_field(path, key, idx, item, "name"),
        message=_str_field(path, key, idx, item, "message"),
    )


def _str_field(path: str, key: str, idx: int, item: dict[str, Any], field: str) -> str:
    value = item.get(field)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedDocument(path, f"{key}[{idx}].{field} must be a string")
    return value
