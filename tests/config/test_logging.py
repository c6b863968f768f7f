"""Tests for the opt-in structlog handler on the ``nullstr`` logger."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest

from nullstr.config.logging import (
    LOGGER_NAME,
    configure_from_settings,
    configure_logging,
    reset_logging,
)
from nullstr.config.settings import NullStrSettings
from nullstr.domain.string import NullString


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Detach our handler and restore the root logger after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    reset_logging()
    root.handlers = original_handlers
    root.setLevel(original_level)


class TestRootLoggerUntouched:
    def test_application_handlers_survive(self) -> None:
        root = logging.getLogger()
        app_handler = logging.NullHandler()
        root.addHandler(app_handler)
        before = root.handlers[:]

        configure_logging(verbose=True, log_json=True)

        assert root.handlers == before
        assert app_handler in root.handlers

    def test_root_level_unchanged(self) -> None:
        root = logging.getLogger()
        root.setLevel(logging.INFO)
        configure_logging(verbose=True)
        assert root.level == logging.INFO


class TestConfigureLogging:
    def test_handler_on_package_logger(self) -> None:
        handler = configure_logging()
        assert logging.getLogger(LOGGER_NAME).handlers == [handler]

    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_propagation_off_by_default(self) -> None:
        configure_logging()
        assert logging.getLogger(LOGGER_NAME).propagate is False

    def test_propagation_opt_in(self) -> None:
        configure_logging(propagate=True)
        assert logging.getLogger(LOGGER_NAME).propagate is True

    def test_reconfigure_replaces_own_handler_only(self) -> None:
        pkg = logging.getLogger(LOGGER_NAME)
        app_handler = logging.NullHandler()
        pkg.addHandler(app_handler)
        try:
            configure_logging(log_json=False)
            second = configure_logging(log_json=True)
            assert pkg.handlers == [app_handler, second]
        finally:
            pkg.removeHandler(app_handler)

    def test_absorbed_shape_logged_as_json(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        NullString.from_json("[1, 2]")

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Absorbed unsupported JSON array into null NullString"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "nullstr.domain.string"
        assert "timestamp" in parsed

    def test_absorbed_shape_silent_when_not_verbose(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=False, log_json=True)
        NullString.from_json("true")
        assert capfd.readouterr().err == ""


class TestResetLogging:
    def test_restores_defaults(self) -> None:
        configure_logging(verbose=True)
        reset_logging()
        pkg = logging.getLogger(LOGGER_NAME)
        assert pkg.handlers == []
        assert pkg.level == logging.NOTSET
        assert pkg.propagate is True


class TestConfigureFromSettings:
    def test_explicit_settings(self) -> None:
        configure_from_settings(NullStrSettings(verbose=True))
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_env_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NULLSTR_VERBOSE", "true")
        configure_from_settings()
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_defaults_are_quiet(self) -> None:
        configure_from_settings()
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING
