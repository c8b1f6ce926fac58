"""Shared utilities for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from adcheck.utils.config import AdCheckConfig, get_config, load_config
from adcheck.utils.errors import AdCheckError

# Shared console instance
console = Console()


def resolve_config(config_path: Path | None) -> AdCheckConfig:
    """Load the configuration for a command.

    Args:
        config_path: Explicit config file, or None to search default locations

    Returns:
        Loaded configuration
    """
    try:
        if config_path is None:
            return get_config()
        return load_config(config_path)
    except FileNotFoundError as e:
        fail(str(e))
    except AdCheckError as e:
        fail(e.message)


def fail(message: str, exit_code: int = 2) -> None:
    """Print an error and exit.

    Args:
        message: Message to display
        exit_code: Process exit code
    """
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(exit_code)


def output_json(data: dict[str, Any] | BaseModel, output: Path | None = None) -> None:
    """Output data as JSON to console or file.

    Args:
        data: Data to output (dict or Pydantic model)
        output: Optional output file path
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")

    json_str = json.dumps(data, indent=2, default=str, ensure_ascii=False)

    if output:
        output.write_text(json_str, encoding="utf-8")
        console.print(f"Written to {output}")
    else:
        console.print_json(json_str)


def read_json_file(path: Path) -> Any:
    """Read a JSON file, exiting with an error if it is unreadable."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        fail(f"Cannot read {path}: {e}")
    except json.JSONDecodeError as e:
        fail(f"Invalid JSON in {path}: {e}")
