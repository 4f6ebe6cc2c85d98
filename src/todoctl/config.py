# src/todoctl/config.py

"""
Settings loaded from an optional YAML file and environment variables.

Precedence (lowest first): defaults, config file, environment.

Config file location: $TODO_CONFIG, else ~/.config/todo/config.yml.
A missing file is fine; a broken one is a ConfigError.

Settings never affect where todo.json lives (see engine.store).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Final, Mapping, Optional

import yaml

from todoctl.engine.validate import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV: Final[str] = "TODO_CONFIG"
DEFAULT_CONFIG_PATH: Final[Path] = Path("~/.config/todo/config.yml")

COLOR_MODES: Final[tuple[str, ...]] = ("auto", "always", "never")


@dataclass(frozen=True, slots=True)
class Settings:
    color: str = "auto"
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    raw = env.get(CONFIG_ENV)
    if raw is not None and raw.strip():
        return Path(raw).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    path = config_path(env)

    settings = _apply(Settings(), _read_config(path), str(path))

    overrides: dict[str, Any] = {}
    if env.get("TODO_COLOR"):
        overrides["color"] = env["TODO_COLOR"]
    if env.get("TODO_LOG_LEVEL"):
        overrides["log_level"] = env["TODO_LOG_LEVEL"]
    if env.get("NO_COLOR"):
        overrides["color"] = "never"

    return _apply(settings, overrides, "environment")


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------

def _read_config(path: Path) -> dict[str, Any]:
    if not path.is_file():
        if path.exists():
            logger.warning("Config path is not a regular file, skipped: %s", path)
        return {}

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(str(path), f"Cannot read file: {e}") from e

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(str(path), f"Invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(str(path), "YAML root must be a mapping/dictionary")

    return data


def _apply(settings: Settings, data: Mapping[str, Any], source: str) -> Settings:
    changes: dict[str, str] = {}

    if "color" in data:
        color = str(data["color"]).strip().lower()
        if color not in COLOR_MODES:
            allowed = ", ".join(COLOR_MODES)
            raise ConfigError(source, f"Invalid color '{data['color']}' (allowed: {allowed})")
        changes["color"] = color

    if "log_level" in data:
        level = str(data["log_level"]).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(source, f"Invalid log_level '{data['log_level']}'")
        changes["log_level"] = level

    return replace(settings, **changes) if changes else settings
