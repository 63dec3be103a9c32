"""Tests for UIDSettings environment loading."""

import logging

import pytest
from pydantic import ValidationError

from ecsuid.config import UIDSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the caller's environment and any .env file."""
    for name in ("ECSUID_STRICT_SALTS", "ECSUID_LOG_WRAPAROUND", "ECSUID_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults_keep_allocation_silent_and_permissive():
    settings = UIDSettings()
    assert settings.strict_salts is False
    assert settings.log_wraparound is False
    assert settings.log_level_number == logging.WARNING


def test_environment_variables_override(monkeypatch):
    monkeypatch.setenv("ECSUID_STRICT_SALTS", "true")
    monkeypatch.setenv("ECSUID_LOG_WRAPAROUND", "1")
    monkeypatch.setenv("ECSUID_LOG_LEVEL", "debug")

    settings = UIDSettings()

    assert settings.strict_salts is True
    assert settings.log_wraparound is True
    assert settings.log_level == "DEBUG"
    assert settings.log_level_number == logging.DEBUG


def test_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("ECSUID_STRICT_SALTS=true\n", encoding="utf-8")
    assert UIDSettings().strict_salts is True


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError, match="Unknown log level"):
        UIDSettings(log_level="chatty")
