"""Tests de configuración (pydantic-settings) y del .env de usuario."""

import logging

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir, load_settings, write_user_env_vars
from core.domain.errors import InvalidConfigurationError
from core.domain.language import Language


def test_defaults(tmp_path):
    settings = AppSettings()
    assert settings.default_language is Language.ENGLISH
    assert settings.log_level == "WARNING"
    assert settings.log_max_bytes == 5 * 1024
    assert settings.log_dir == tmp_path / "logs"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PATTERNBOOK_DEFAULT_LANGUAGE", "es")
    monkeypatch.setenv("PATTERNBOOK_LOG_LEVEL", "debug")
    monkeypatch.setenv("PATTERNBOOK_LOG_MAX_BYTES", "1024")
    settings = AppSettings()
    assert settings.default_language is Language.SPANISH
    assert settings.log_level == "DEBUG"
    assert settings.log_max_bytes == 1024


def test_invalid_values_are_rejected(monkeypatch):
    monkeypatch.setenv("PATTERNBOOK_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        AppSettings()


def test_load_settings_wraps_validation_errors(monkeypatch):
    monkeypatch.setenv("PATTERNBOOK_LOG_LEVEL", "chatty")
    with pytest.raises(InvalidConfigurationError) as excinfo:
        load_settings()
    err = excinfo.value
    assert err.exit_code == 2
    assert err.code == "invalid_config"
    assert str(err).startswith("Invalid configuration: log_level")
    assert err.details["errors"][0]["field"] == "log_level"
    assert isinstance(err.__cause__, ValidationError)


def test_user_config_dir_follows_xdg(tmp_path):
    assert get_user_config_dir() == tmp_path / "config" / "patternbook"


def test_write_user_env_vars_merges(tmp_path):
    env_path = tmp_path / "user.env"
    env_path.write_text("# comment\nPATTERNBOOK_LOG_LEVEL=INFO\n", encoding="utf-8")
    write_user_env_vars({"PATTERNBOOK_DEFAULT_LANGUAGE": "es", "IGNORED": None}, env_path=env_path)
    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "PATTERNBOOK_LOG_LEVEL=INFO" in lines
    assert "PATTERNBOOK_DEFAULT_LANGUAGE=es" in lines
    assert not any(line.startswith("IGNORED") for line in lines)


def test_language_helpers():
    assert Language.from_bool(True) is Language.SPANISH
    assert Language.default() is Language.ENGLISH
    assert Language.SPANISH.label() == "Español"


def test_configure_logging_is_idempotent():
    from core.logging_setup import configure_logging

    root = logging.getLogger()
    try:
        configure_logging("INFO")
        configure_logging("debug")
        named = [h for h in root.handlers if h.get_name() == "patternbook-rich"]
        assert len(named) == 1
        assert named[0].level == logging.DEBUG
        assert root.level == logging.DEBUG
    finally:
        for handler in [h for h in root.handlers if h.get_name() == "patternbook-rich"]:
            root.removeHandler(handler)
        root.setLevel(logging.WARNING)
