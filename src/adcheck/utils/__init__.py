"""Utility functions for adcheck."""

from adcheck.utils.logging import configure_logging, get_logger, get_logger_with_context
from adcheck.utils.errors import (
    AdCheckError,
    CatalogError,
    ConfigurationError,
    FetchError,
    ValidationError,
)
from adcheck.utils.config import (
    AdCheckConfig,
    CheckConfig,
    FetchConfig,
    OutputConfig,
    get_config,
    load_config,
    save_config,
    set_config,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    # Errors
    "AdCheckError",
    "CatalogError",
    "ConfigurationError",
    "FetchError",
    "ValidationError",
    # Config
    "AdCheckConfig",
    "CheckConfig",
    "FetchConfig",
    "OutputConfig",
    "get_config",
    "load_config",
    "save_config",
    "set_config",
]
