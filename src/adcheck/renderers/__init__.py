"""Output format renderers."""

from adcheck.renderers.base import BaseRenderer, OutputFormat, RenderContext, Renderer
from adcheck.renderers.json import JSONRenderer
from adcheck.renderers.markdown import MarkdownRenderer
from adcheck.renderers.terminal import TerminalRenderer

__all__ = [
    "BaseRenderer",
    "OutputFormat",
    "RenderContext",
    "Renderer",
    "JSONRenderer",
    "MarkdownRenderer",
    "TerminalRenderer",
    "get_renderer",
]


def get_renderer(format: OutputFormat | str) -> BaseRenderer:
    """Get a renderer for the specified format.

    Args:
        format: Output format (OutputFormat enum or string)

    Returns:
        Appropriate renderer instance

    Raises:
        ValueError: If format is not supported
    """
    if isinstance(format, str):
        format = OutputFormat(format)

    renderers = {
        OutputFormat.JSON: JSONRenderer,
        OutputFormat.MARKDOWN: MarkdownRenderer,
        OutputFormat.TERMINAL: TerminalRenderer,
    }

    renderer_class = renderers.get(format)
    if renderer_class is None:
        raise ValueError(f"Unsupported format: {format}")

    return renderer_class()
