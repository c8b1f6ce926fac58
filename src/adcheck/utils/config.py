"""Configuration file support for adcheck."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from adcheck.core.matching import MatchStrategy
from adcheck.models.common import Platform
from adcheck.utils.errors import ConfigurationError

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class CheckConfig(BaseModel):
    """Compliance check configuration."""

    default_platform: Platform = Field(default=Platform.BOTH, description="Platform when none is given")
    catalog_path: str | None = Field(default=None, description="Custom policy catalog YAML")
    match_strategy: MatchStrategy = Field(
        default=MatchStrategy.SUBSTRING,
        description="Phrase matching strategy",
    )
    strict_platform: bool = Field(default=False, description="Reject unknown platform names")


class FetchConfig(BaseModel):
    """Landing page fetch configuration."""

    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")
    max_redirects: int = Field(default=5, ge=0, description="Redirects to follow")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header")


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: str = Field(default="terminal", description="Default output format")
    color: bool = Field(default=True, description="Enable color output")
    verbose: bool = Field(default=False, description="Verbose output")


class AdCheckConfig(BaseModel):
    """Main configuration for adcheck."""

    check: CheckConfig = Field(default_factory=CheckConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths.

    Returns:
        List of paths to check for configuration files
    """
    paths = [
        Path.cwd() / ".adcheck.yaml",
        Path.cwd() / ".adcheck.yml",
        Path.cwd() / "adcheck.yaml",
    ]

    home = Path.home()
    paths.append(home / ".adcheck.yaml")
    paths.append(home / ".adcheck" / "config.yaml")
    paths.append(home / ".config" / "adcheck" / "config.yaml")

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "adcheck" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> AdCheckConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ConfigurationError: If the file is not valid configuration
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise FileNotFoundError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return AdCheckConfig()


def _load_config_file(path: Path) -> AdCheckConfig:
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}")

    if data is None:
        return AdCheckConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    try:
        return AdCheckConfig.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(p) for p in first["loc"])
        raise ConfigurationError(f"Invalid config value for {key}: {first['msg']}", config_key=key)


def save_config(config: AdCheckConfig, config_path: Path | str | None = None) -> Path:
    """Save configuration to file.

    Args:
        config: Configuration to save
        config_path: Path to save to. Defaults to ~/.adcheck/config.yaml

    Returns:
        Path where config was saved
    """
    if config_path is None:
        config_path = Path.home() / ".adcheck" / "config.yaml"
    else:
        config_path = Path(config_path)

    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude_defaults=True)
    config_path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))

    return config_path


def get_default_config() -> AdCheckConfig:
    """Get the default configuration."""
    return AdCheckConfig()


_config: AdCheckConfig | None = None


def get_config() -> AdCheckConfig:
    """Get the global configuration instance.

    Loads from file on first call.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: AdCheckConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
