# src/todoctl/engine/model.py

"""
Core domain models.

This module defines the in-memory representation of the task document:
tasks, the three priority buckets and the done bucket.

No filesystem access should happen here.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


# ---------------------------------------------------------------------
# Priority
# ---------------------------------------------------------------------

class Priority(str, Enum):
    """
    Active bucket tag.

    Declaration order is display order: high > mid > low.
    """

    HIGH = "high"
    MID = "mid"
    LOW = "low"

    @property
    def header(self) -> str:
        return f"{self.value.capitalize()}:"


DONE_KEY = "done"
DONE_HEADER = "Done:"

# Persisted top-level keys, in the order they are written.
BUCKET_KEYS: tuple[str, ...] = tuple(p.value for p in Priority) + (DONE_KEY,)


# ---------------------------------------------------------------------
# Task
# ---------------------------------------------------------------------

@dataclass(slots=True)
class Task:
    """
    A single to-do entry.

    `name` is the identity used by every command. A task decoded with an
    empty name is kept in the document but no command can address it.
    """

    name: str
    message: str

    def matches(self, search: str) -> bool:
        """Case-sensitive substring match on name or message."""
        return search in self.name or search in self.message


# ---------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------

def _empty_active() -> dict[Priority, list[Task]]:
    return {p: [] for p in Priority}


@dataclass(slots=True)
class Document:
    """
    The whole task document.

    Notes:
    - `active` always holds one list per Priority.
    - Lists keep insertion order; there is no key-indexed storage.
    - Names are unique across the active buckets; `done` is not covered.
    """

    active: dict[Priority, list[Task]] = field(default_factory=_empty_active)
    done: list[Task] = field(default_factory=list)

    def __post_init__(self) -> None:
        for p in Priority:
            self.active.setdefault(p, [])

    # -----------------------------------------------------------------
    # Lookup
    # -----------------------------------------------------------------

    def bucket(self, key: str) -> list[Task]:
        """Return the list behind a persisted bucket key."""
        if key == DONE_KEY:
            return self.done
        return self.active[Priority(key)]

    def iter_active(self) -> Iterator[tuple[Priority, list[Task]]]:
        for p in Priority:
            yield p, self.active[p]

    def contains_active(self, name: str) -> bool:
        return any(t.name == name for _, tasks in self.iter_active() for t in tasks)

    def locate(self, name: str) -> Optional[Priority]:
        """Return the first active bucket holding `name`, if any."""
        for p, tasks in self.iter_active():
            if any(t.name == name for t in tasks):
                return p
        return None

    # -----------------------------------------------------------------
    # Mutation helpers
    # -----------------------------------------------------------------

    def pop_active(self, name: str) -> Optional[Task]:
        """
        Remove every active task named `name`.

        Returns the first one removed (high, mid, low scan order),
        or None when nothing matched.
        """
        found: Optional[Task] = None
        for p, tasks in self.iter_active():
            kept: list[Task] = []
            for t in tasks:
                if t.name == name:
                    if found is None:
                        found = t
                    continue
                kept.append(t)
            self.active[p] = kept
        return found
