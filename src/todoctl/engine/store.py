# src/todoctl/engine/store.py

"""
Filesystem binding for the task document.

This module contains:
- store path resolution (TODO_DIR, explicit directory, working directory),
- whole-file load and save of the document.

No locking is performed: concurrent invocations are last-writer-wins.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final, Mapping, Optional

from .codec import decode, encode
from .model import Document
from .validate import IoError, NotFound

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------

STORE_FILE_NAME: Final[str] = "todo.json"
DIR_ENV: Final[str] = "TODO_DIR"


# ---------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------

def resolve_path(directory: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Resolve the document path.

    Precedence:
    1. $TODO_DIR/todo.json, whenever the variable is set (even if empty);
    2. <directory>/todo.json for a non-empty `directory`;
    3. ./todo.json.
    """
    env = os.environ if environ is None else environ

    override = env.get(DIR_ENV)
    if override is not None:
        return Path(override) / STORE_FILE_NAME

    if directory:
        return Path(directory) / STORE_FILE_NAME

    return Path(STORE_FILE_NAME)


# ---------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------

class Store:
    """
    Load/save of one document file.

    The file is read and written whole. Partial writes are not recovered.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @classmethod
    def resolve(cls, directory: Optional[str] = None) -> "Store":
        path = resolve_path(directory)
        logger.debug("Resolved store path: %s", path)
        return cls(path)

    def load(self) -> Document:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError as e:
            raise NotFound(f"{self.path}: file does not exist") from e
        except OSError as e:
            raise IoError(str(self.path), f"Cannot read file: {e}") from e

        doc = decode(raw, path=str(self.path))
        logger.debug("Loaded %s (%d bytes)", self.path, len(raw))
        return doc

    def save(self, doc: Document) -> None:
        raw = encode(doc)

        # Created with 0666 minus umask; existing files keep their mode.
        try:
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
            with os.fdopen(fd, "wb") as f:
                f.write(raw)
        except OSError as e:
            raise IoError(str(self.path), f"Cannot write file: {e}") from e

        logger.debug("Saved %s (%d bytes)", self.path, len(raw))
