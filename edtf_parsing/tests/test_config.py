import logging

import pytest

from edtf_parsing.config import load_config


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EDTF_LOG_LEVEL", raising=False)
    monkeypatch.delenv("EDTF_MAX_INPUT_LENGTH", raising=False)
    monkeypatch.delenv("EDTF_ALLOWED_ORIGINS", raising=False)

    config = load_config()

    assert config.log_level == "WARNING"
    assert config.log_level_value == logging.WARNING
    assert config.max_input_length == 1024
    assert config.allowed_origins == ()
    assert config.cors_origins == ["*"]


def test_load_config_parses_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EDTF_LOG_LEVEL", "debug")
    monkeypatch.setenv("EDTF_MAX_INPUT_LENGTH", "64")
    monkeypatch.setenv("EDTF_ALLOWED_ORIGINS", "http://localhost:3000, https://example.com/")

    config = load_config()

    assert config.log_level == "DEBUG"
    assert config.log_level_value == logging.DEBUG
    assert config.max_input_length == 64
    assert config.allowed_origins == ("http://localhost:3000", "https://example.com/")
    assert config.cors_origins == ["http://localhost:3000", "https://example.com/"]


def test_load_config_unknown_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that unknown level names fall back to the default."""
    monkeypatch.setenv("EDTF_LOG_LEVEL", "chatty")

    assert load_config().log_level == "WARNING"


def test_load_config_blank_length_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EDTF_MAX_INPUT_LENGTH", "  ")

    assert load_config().max_input_length == 1024


@pytest.mark.parametrize("value", ["lots", "0", "-5"])
def test_load_config_rejects_bad_length(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("EDTF_MAX_INPUT_LENGTH", value)
    with pytest.raises(ValueError):
        load_config()
