"""Unit tests for errors and logging."""

import io
import logging

import httpx

from adcheck.fetch.page import PageFetcher
from adcheck.utils.errors import (
    AdCheckError,
    CatalogError,
    ConfigurationError,
    FetchError,
    ValidationError,
)
from adcheck.utils.logging import configure_logging, get_logger, get_logger_with_context


class TestErrors:
    """Tests for the error hierarchy."""

    def test_base_defaults(self):
        """The base error has a generic code and no details."""
        error = AdCheckError("something broke")

        assert str(error) == "something broke"
        assert error.code == "UNKNOWN_ERROR"
        assert error.details == {}

    def test_subclass_codes(self):
        """Each subclass carries its code and context."""
        assert ValidationError("bad", field="platform").details == {"field": "platform"}
        assert ConfigurationError("bad", config_key="fetch.timeout").code == "CONFIG_ERROR"
        assert CatalogError("bad", path="c.yaml").details == {"path": "c.yaml"}
        assert FetchError("bad", url="https://x").code == "FETCH_ERROR"

    def test_all_are_adcheck_errors(self):
        """Callers can catch AdCheckError for everything."""
        for cls in (ValidationError, ConfigurationError, CatalogError, FetchError):
            assert issubclass(cls, AdCheckError)

    def test_to_check_error(self):
        """Errors convert to the CheckError model."""
        model = ValidationError("Unknown platform", field="platform").to_check_error()

        assert model.code == "VALIDATION_ERROR"
        assert model.message == "Unknown platform"
        assert model.details == {"field": "platform"}


class TestLogging:
    """Tests for logging helpers."""

    def test_logger_namespace(self):
        """Loggers live under the adcheck namespace."""
        assert get_logger("core.checker").name == "adcheck.core.checker"
        assert get_logger("adcheck.fetch").name == "adcheck.fetch"

    def test_configure_level(self):
        """configure_logging sets the package logger level."""
        configure_logging(level="DEBUG")
        assert logging.getLogger("adcheck").level == logging.DEBUG
        configure_logging(level="WARNING")

    def test_context_adapter(self):
        """Context is attached to every record."""
        adapter = get_logger_with_context("fetch", url="https://example.com")
        _, kwargs = adapter.process("msg", {})
        assert kwargs["extra"]["context"] == {"url": "https://example.com"}

    def test_structured_output_carries_context(self):
        """Structured lines end with the record's context."""
        stream = io.StringIO()
        configure_logging(level="DEBUG", structured=True, stream=stream)
        transport = httpx.MockTransport(lambda request: httpx.Response(503))
        try:
            PageFetcher(transport=transport).fetch("https://ctx.example/listing")
        finally:
            configure_logging(level="WARNING")

        lines = stream.getvalue().splitlines()
        assert any(line.endswith("url=https://ctx.example/listing") for line in lines)
        assert any("adcheck.fetch" in line and "returned 503" in line for line in lines)

    def test_plain_output_omits_context(self):
        """Plain lines are level and message only."""
        stream = io.StringIO()
        configure_logging(level="INFO", stream=stream)
        try:
            get_logger_with_context("fetch", url="https://example.com").info("hello")
        finally:
            configure_logging(level="WARNING")

        assert stream.getvalue() == "INFO: hello\n"
