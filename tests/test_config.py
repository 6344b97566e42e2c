from __future__ import annotations

import logging

import pytest

from sdkutils.config import default_timeout, getenv, getenv_float
from sdkutils.logging import get_logger


def test_getenv_uses_first_non_empty_alias(monkeypatch):
    monkeypatch.setenv("SDKUTILS_A", "")
    monkeypatch.setenv("SDKUTILS_B", "b")
    assert getenv("SDKUTILS_A", "d", "SDKUTILS_B") == "b"
    assert getenv("SDKUTILS_MISSING", "d") == "d"


def test_getenv_float(monkeypatch):
    monkeypatch.setenv("SDKUTILS_F", "2.5")
    assert getenv_float("SDKUTILS_F") == 2.5
    monkeypatch.setenv("SDKUTILS_F", "soon")
    with pytest.raises(ValueError):
        getenv_float("SDKUTILS_F")


def test_default_timeout_unset_is_none():
    assert default_timeout() is None


def test_get_logger_is_configured_once(monkeypatch):
    monkeypatch.setenv("SDKUTILS_LOG_LEVEL", "debug")
    logger = get_logger("sdkutils.tests.once")
    again = get_logger("sdkutils.tests.once")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_resolve_level(monkeypatch):
    from sdkutils.logging import resolve_level

    monkeypatch.delenv("SDKUTILS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert resolve_level() == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level("chatty") == logging.INFO
    monkeypatch.setenv("LOG_LEVEL", "error")
    assert resolve_level() == logging.ERROR
