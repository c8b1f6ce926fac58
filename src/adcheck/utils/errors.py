"""Error handling utilities for adcheck."""

from __future__ import annotations

from typing import Any

from adcheck.models.common import CheckError


class AdCheckError(Exception):
    """Base exception for adcheck."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_check_error(self) -> CheckError:
        """Convert to CheckError model."""
        return CheckError(code=self.code, message=self.message, details=self.details)


class ValidationError(AdCheckError):
    """Validation failed."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class ConfigurationError(AdCheckError):
    """Configuration error."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)


class CatalogError(AdCheckError):
    """Policy catalog could not be loaded or saved."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, code="CATALOG_ERROR", details=details)


class FetchError(AdCheckError):
    """Landing page fetch could not be attempted."""

    def __init__(self, message: str, url: str | None = None):
        details = {"url": url} if url else {}
        super().__init__(message, code="FETCH_ERROR", details=details)
