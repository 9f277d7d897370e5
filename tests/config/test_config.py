from __future__ import annotations

import logging

import pytest

from timext.config import (
    LOG_LEVEL_ENV,
    SATURATE_ENV,
    CliConfig,
    ConfigurationError,
    configure_logging,
    env_bool,
    env_log_level,
    get_cli_config,
)
from timext.config.logging import LOG_FORMAT


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("TRUE", True), (" yes ", True), ("on", True), ("0", False), ("off", False)],
)
def test_env_bool_parses_flags(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", raw)

    assert env_bool("EXAMPLE_FLAG", default=not expected) is expected


def test_env_bool_blank_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", "   ")
    assert env_bool("EXAMPLE_FLAG", default=True) is True

    monkeypatch.delenv("EXAMPLE_FLAG")
    assert env_bool("EXAMPLE_FLAG", default=False) is False


def test_env_bool_rejects_unknown_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", "maybe")

    with pytest.raises(ConfigurationError) as exc:
        env_bool("EXAMPLE_FLAG", default=False)

    assert "EXAMPLE_FLAG" in str(exc.value)


def test_env_log_level_accepts_names_and_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_LEVEL", "debug")
    assert env_log_level("EXAMPLE_LEVEL", default=logging.INFO) == logging.DEBUG

    monkeypatch.setenv("EXAMPLE_LEVEL", "30")
    assert env_log_level("EXAMPLE_LEVEL", default=logging.INFO) == logging.WARNING

    monkeypatch.setenv("EXAMPLE_LEVEL", "chatty")
    with pytest.raises(ConfigurationError):
        env_log_level("EXAMPLE_LEVEL", default=logging.INFO)


def test_get_cli_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(SATURATE_ENV, raising=False)

    assert get_cli_config() == CliConfig(log_level=logging.INFO, saturate=False)


def test_get_cli_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "WARNING")
    monkeypatch.setenv(SATURATE_ENV, "true")

    assert get_cli_config() == CliConfig(log_level=logging.WARNING, saturate=True)


def test_configure_logging_uses_cli_level(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

    configure_logging(CliConfig(log_level=logging.DEBUG), force=True)

    assert captured["level"] == logging.DEBUG
    assert captured["format"] == LOG_FORMAT
    assert captured["force"] is True
