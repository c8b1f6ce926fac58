"""Base renderer protocol and types."""

from enum import Enum
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from adcheck.models.finding import ComplianceReport


class OutputFormat(str, Enum):
    """Supported output formats."""

    JSON = "json"
    MARKDOWN = "markdown"
    TERMINAL = "terminal"


class RenderContext(BaseModel):
    """Context for rendering operations."""

    model_config = {"frozen": True}

    format: OutputFormat = Field(default=OutputFormat.TERMINAL, description="Output format")
    output_path: Path | None = Field(default=None, description="Output file path")
    verbose: bool = Field(default=False, description="Include passed checks in output")
    color: bool = Field(default=True, description="Enable color output (terminal only)")
    indent: int = Field(default=2, description="JSON indentation")


@runtime_checkable
class Renderer(Protocol):
    """Protocol for output renderers.

    Renderers turn a ComplianceReport into human-readable or
    machine-readable output.
    """

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        ...

    def render(self, report: ComplianceReport, context: RenderContext) -> str:
        """Render a report to a string."""
        ...

    def render_to_file(self, report: ComplianceReport, context: RenderContext) -> None:
        """Render a report directly to context.output_path."""
        ...


class BaseRenderer:
    """Base implementation with common functionality.

    Subclasses implement the format property and render method.
    """

    def render_to_file(self, report: ComplianceReport, context: RenderContext) -> None:
        """Render a report directly to a file.

        Raises:
            ValueError: If context.output_path is not set
        """
        if context.output_path is None:
            raise ValueError("output_path must be set in context for file rendering")

        content = self.render(report, context)
        context.output_path.write_text(content, encoding="utf-8")

    def render(self, report: ComplianceReport, context: RenderContext) -> str:
        """Render a report to a string. Must be implemented by subclasses."""
        raise NotImplementedError
