# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from todoctl.engine.store import Store

from helpers import EMPTY_DOCUMENT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """
    Keep the real environment out of every test.

    TODO_CONFIG points at a file that does not exist so the user's own
    settings are never read.
    """
    for name in ("TODO_DIR", "TODO_COLOR", "TODO_LOG_LEVEL", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TODO_CONFIG", str(tmp_path / "no-such-config.yml"))


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """cli.main() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture()
def todo_dir(tmp_path: Path) -> Path:
    """A directory holding an empty document."""
    d = tmp_path / "data"
    d.mkdir()
    (d / "todo.json").write_text(EMPTY_DOCUMENT, encoding="utf-8")
    return d


@pytest.fixture()
def store(todo_dir: Path) -> Store:
    return Store(todo_dir / "todo.json")
