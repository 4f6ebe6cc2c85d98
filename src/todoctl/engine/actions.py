# src/todoctl/engine/actions.py

"""
Task mutation actions.

This module contains *all* state-changing operations on the document:
add, update (message and/or priority move), complete and remove, plus the
read-only listing used by `ls`.

Design principles:
- Argument errors are raised before the store is touched.
- Every command is one load, in-memory mutation, one save.
- Only the active buckets are searched by name; `done` is append-only.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .model import DONE_HEADER, DONE_KEY, Document, Priority, Task
from .store import Store
from .validate import DuplicateName, NotFound, parse_priority, require_message, require_name

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# In-memory mutations
# ---------------------------------------------------------------------

def insert_task(doc: Document, task: Task, priority: Priority) -> None:
    """Append a new task to `priority`, rejecting active duplicates."""
    if doc.contains_active(task.name):
        raise DuplicateName(task.name)
    doc.active[priority].append(task)


def rewrite_message(doc: Document, name: str, message: str) -> int:
    """
    Overwrite the message of every active task named `name`.

    Returns the number of tasks changed.
    """
    changed = 0
    for _, tasks in doc.iter_active():
        for t in tasks:
            if t.name == name:
                t.message = message
                changed += 1
    return changed


def move_task(doc: Document, name: str, priority: Priority) -> Task:
    """
    Move the named task to the tail of `priority`.

    Moving into the current bucket still moves it to the tail.
    """
    task = doc.pop_active(name)
    if task is None:
        raise NotFound()
    doc.active[priority].append(task)
    return task


def finish_task(doc: Document, name: str) -> Task:
    """Move the named task from its active bucket to the tail of `done`."""
    task = doc.pop_active(name)
    if task is None:
        raise NotFound()
    doc.done.append(task)
    return task


def discard_task(doc: Document, name: str) -> int:
    """
    Drop every active task named `name`.

    `done` is left alone. Returns how many tasks were dropped.
    """
    dropped = 0
    for p, tasks in doc.iter_active():
        kept = [t for t in tasks if t.name != name]
        dropped += len(tasks) - len(kept)
        doc.active[p] = kept
    return dropped


# ---------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Section:
    """
    One non-empty bucket as shown by `ls`.

    `key` is the persisted bucket key; it selects the palette.
    """

    key: str
    header: str
    tasks: tuple[Task, ...]


def filter_sections(doc: Document, *, search: str = "", show_all: bool = False) -> list[Section]:
    """
    Build the `ls` view: high, mid, low, then done when `show_all` is set.

    Buckets with no task matching `search` are omitted.
    """
    sections: list[Section] = []

    for p, tasks in doc.iter_active():
        hits = tuple(t for t in tasks if t.matches(search))
        if hits:
            sections.append(Section(key=p.value, header=p.header, tasks=hits))

    if show_all:
        hits = tuple(t for t in doc.done if t.matches(search))
        if hits:
            sections.append(Section(key=DONE_KEY, header=DONE_HEADER, tasks=hits))

    return sections


# ---------------------------------------------------------------------
# Public actions
# ---------------------------------------------------------------------

def list_tasks(store: Store, *, search: str = "", show_all: bool = False) -> list[Section]:
    doc = store.load()
    return filter_sections(doc, search=search, show_all=show_all)


def add_task(
    store: Store,
    *,
    name: Optional[str],
    message: Optional[str],
    priority: Optional[str] = None,
) -> None:
    """
    Add a task.

    - name and message are required.
    - priority defaults to low when omitted (None); an empty string is invalid.
    """
    name = require_name(name)
    message = require_message(message)
    prio = Priority.LOW if priority is None else parse_priority(priority)

    doc = store.load()
    insert_task(doc, Task(name=name, message=message), prio)
    logger.debug("Added %r to %s", name, prio.value)
    store.save(doc)


def update_task(
    store: Store,
    *,
    name: Optional[str],
    message: Optional[str] = None,
    priority: Optional[str] = None,
) -> bool:
    """
    Update a task's message and/or priority.

    Empty message or priority count as absent. With neither, nothing is
    read or written and False is returned.

    The message is rewritten before the move, so a moved task carries it.
    """
    name = require_name(name)

    if not message and not priority:
        return False

    prio = parse_priority(priority) if priority else None

    doc = store.load()

    if message:
        changed = rewrite_message(doc, name, message)
        logger.debug("Rewrote message of %d task(s) named %r", changed, name)

    if prio is not None:
        move_task(doc, name, prio)
        logger.debug("Moved %r to %s", name, prio.value)

    store.save(doc)
    return True


def complete_task(store: Store, *, name: Optional[str]) -> None:
    name = require_name(name)

    doc = store.load()
    finish_task(doc, name)
    logger.debug("Completed %r", name)
    store.save(doc)


def remove_task(store: Store, *, name: Optional[str]) -> None:
    """
    Remove a task from the active buckets.

    Idempotent: a missing name still rewrites the file and succeeds.
    """
    name = require_name(name)

    doc = store.load()
    dropped = discard_task(doc, name)
    logger.debug("Removed %d task(s) named %r", dropped, name)
    store.save(doc)
