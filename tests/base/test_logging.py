"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from adapters.diagnostics import StructlogDiagnosticSink
from core.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger and structlog state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ours = logging.getLogger("storefront")
    ours_level = ours.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ours.setLevel(ours_level)
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("storefront").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("storefront").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("storefront.api").warning("json test", status=500)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["status"] == 500
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "storefront.api"
        assert "timestamp" in parsed

    def test_request_diagnostics_hidden_unless_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        StructlogDiagnosticSink().emit("api_request", endpoint="http://api.test/api/products")
        assert capfd.readouterr().err == ""

    def test_request_diagnostics_when_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        StructlogDiagnosticSink().emit("api_request", endpoint="http://api.test/api/products", token_preview="none")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "api_request"
        assert parsed["level"] == "debug"

    def test_httpx_noise_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("httpx").info("HTTP Request: GET http://api.test/api/products")
        assert capfd.readouterr().err == ""
