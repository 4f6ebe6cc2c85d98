# tests/helpers.py

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from todoctl.engine.model import Document, Priority, Task

EMPTY_DOCUMENT = '{"high":[],"mid":[],"low":[],"done":[]}'

Pairs = Sequence[tuple[str, str]]


def read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def make_doc(high: Pairs = (), mid: Pairs = (), low: Pairs = (), done: Pairs = ()) -> Document:
    doc = Document()
    for prio, items in ((Priority.HIGH, high), (Priority.MID, mid), (Priority.LOW, low)):
        doc.active[prio].extend(Task(name=n, message=m) for n, m in items)
    doc.done.extend(Task(name=n, message=m) for n, m in done)
    return doc
