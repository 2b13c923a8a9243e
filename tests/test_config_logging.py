from __future__ import annotations

import logging

import pytest
import structlog
from pydantic import ValidationError as SettingsError
from structlog.testing import capture_logs

import shapeguard as sg
from shapeguard.config import Settings, get_settings
from shapeguard.logging import (
    LoggerRegistry,
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers, root.level = handlers, level


def test_defaults(monkeypatch) -> None:
    for name in ("SHAPEGUARD_LOG_LEVEL", "SHAPEGUARD_LOG_JSON", "SHAPEGUARD_LOG_FAILURES"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)

    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_JSON is False
    assert settings.LOG_FAILURES is False


def test_environment_prefix(monkeypatch) -> None:
    monkeypatch.setenv("SHAPEGUARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("SHAPEGUARD_LOG_JSON", "true")

    settings = get_settings()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_JSON is True
    assert get_settings() is settings


def test_unknown_log_level_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("SHAPEGUARD_LOG_LEVEL", "chatty")

    with pytest.raises(SettingsError):
        Settings(_env_file=None)


def test_parse_failures_are_logged_when_enabled(monkeypatch) -> None:
    monkeypatch.setenv("SHAPEGUARD_LOG_FAILURES", "1")

    with capture_logs() as logs, pytest.raises(sg.ValidationError):
        sg.string().min(3).parse("ab")

    assert logs == [{"event": "parse_failed", "log_level": "debug", "schema": "string",
        "reason": "'ab' should be at least 3 characters", "constraint": "min"}]


def test_parse_failures_are_silent_by_default(monkeypatch) -> None:
    monkeypatch.delenv("SHAPEGUARD_LOG_FAILURES", raising=False)

    with capture_logs() as logs, pytest.raises(sg.ValidationError):
        sg.number().parse("1")

    assert logs == []


def test_registry_returns_one_logger_per_domain() -> None:
    assert LoggerRegistry.get("validation") is LoggerRegistry.get("validation")
    assert LoggerRegistry.get("validation") is not LoggerRegistry.get("boundaries")


@pytest.mark.usefixtures("restore_logging")
def test_configure_logging_json(capsys) -> None:
    configure_logging(level="warning", json_logs=True)
    root = logging.getLogger()

    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    structlog.get_logger("shapeguard.test").warning("configured", value="x" * 300)
    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert '"event": "configured"' in line
    assert '"library": "shapeguard"' in line
    assert "x" * 201 not in line

    bind_context(request_id="r-1")
    try:
        structlog.get_logger("shapeguard.test").warning("bound")
    finally:
        clear_context()
    structlog.get_logger("shapeguard.test").warning("unbound")
    bound, unbound = capsys.readouterr().out.strip().splitlines()[-2:]
    assert '"request_id": "r-1"' in bound
    assert "request_id" not in unbound


@pytest.mark.usefixtures("restore_logging")
def test_configure_from_settings(monkeypatch) -> None:
    monkeypatch.setenv("SHAPEGUARD_LOG_LEVEL", "error")

    configure_from_settings()

    assert logging.getLogger().level == logging.ERROR
