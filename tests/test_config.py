import logging

import pytest

from possessive.config import _env_int, _env_str, setup_logging


@pytest.mark.parametrize("value, expected", [("2048", 2048), ("abc", 1_000_000), ("", 1_000_000)])
def test_env_int(monkeypatch, value, expected):
    monkeypatch.setenv("POSSESSIVE_MAX_UPLOAD_BYTES", value)
    assert _env_int("POSSESSIVE_MAX_UPLOAD_BYTES", 1_000_000) == expected


def test_env_int_unset(monkeypatch):
    monkeypatch.delenv("POSSESSIVE_MAX_UPLOAD_BYTES", raising=False)
    assert _env_int("POSSESSIVE_MAX_UPLOAD_BYTES", 1_000_000) == 1_000_000


@pytest.mark.parametrize("value, expected", [("alternative", "alternative"), ("   ", "standard"), ("", "standard")])
def test_env_str(monkeypatch, value, expected):
    monkeypatch.setenv("POSSESSIVE_DEFAULT_STYLE", value)
    assert _env_str("POSSESSIVE_DEFAULT_STYLE", "standard") == expected


def test_setup_logging_unknown_level_falls_back_to_info():
    logger = setup_logging("chatty")
    assert logger.level == logging.INFO

    setup_logging("debug")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    setup_logging("INFO")
