# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todoctl.config import Settings, config_path, load_settings
from todoctl.engine.validate import ConfigError


def _env(cfg: Path, **extra: str) -> dict[str, str]:
    return {"TODO_CONFIG": str(cfg), **extra}


def test_defaults_without_file(tmp_path: Path) -> None:
    settings = load_settings(_env(tmp_path / "missing.yml"))
    assert settings == Settings()
    assert settings.log_level_value == logging.WARNING


def test_config_path_default_is_under_home() -> None:
    assert config_path({}).name == "config.yml"
    assert config_path({}).parent.name == "todo"


def test_file_values_are_normalised(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yml"
    cfg.write_text("color: Always\nlog_level: debug\nunknown: 1\n", encoding="utf-8")

    settings = load_settings(_env(cfg))

    assert settings.color == "always"
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == logging.DEBUG


def test_environment_overrides_file(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yml"
    cfg.write_text("color: always\nlog_level: INFO\n", encoding="utf-8")

    settings = load_settings(_env(cfg, TODO_COLOR="auto", TODO_LOG_LEVEL="ERROR"))
    assert settings == Settings(color="auto", log_level="ERROR")


def test_no_color_wins(tmp_path: Path) -> None:
    settings = load_settings(_env(tmp_path / "missing.yml", TODO_COLOR="always", NO_COLOR="1"))
    assert settings.color == "never"


def test_empty_no_color_is_ignored(tmp_path: Path) -> None:
    settings = load_settings(_env(tmp_path / "missing.yml", TODO_COLOR="always", NO_COLOR=""))
    assert settings.color == "always"


def test_config_path_that_is_a_directory_is_skipped_with_warning(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    cfg_dir = tmp_path / "config.yml"
    cfg_dir.mkdir()

    with caplog.at_level(logging.WARNING, logger="todoctl.config"):
        settings = load_settings(_env(cfg_dir))

    assert settings == Settings()
    assert "not a regular file" in caplog.text
    assert str(cfg_dir) in caplog.text


def test_missing_config_logs_nothing(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="todoctl.config"):
        load_settings(_env(tmp_path / "missing.yml"))
    assert caplog.records == []


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yml"
    cfg.write_text("", encoding="utf-8")
    assert load_settings(_env(cfg)) == Settings()


@pytest.mark.parametrize(
    "text",
    [
        "color: [unclosed\n",
        "- just\n- a list\n",
        "color: rainbow\n",
        "log_level: LOUD\n",
    ],
)
def test_invalid_file_raises(tmp_path: Path, text: str) -> None:
    cfg = tmp_path / "config.yml"
    cfg.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(_env(cfg))


def test_invalid_environment_value_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc:
        load_settings(_env(tmp_path / "missing.yml", TODO_COLOR="sometimes"))
    assert str(exc.value).startswith("environment: ")
