"""JSON renderer for compliance reports."""

from __future__ import annotations

import json

from adcheck.models.finding import ComplianceReport
from adcheck.renderers.base import BaseRenderer, OutputFormat, RenderContext


class JSONRenderer(BaseRenderer):
    """Renderer for JSON output format.

    Example:
        renderer = JSONRenderer()
        json_str = renderer.render(report, RenderContext(format=OutputFormat.JSON))
    """

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.JSON

    def render(self, report: ComplianceReport, context: RenderContext) -> str:
        """Render a report to a JSON string.

        The per-rule ``checks`` list is only included when context.verbose
        is set.
        """
        data = report.model_dump(mode="json", exclude=None if context.verbose else {"checks"})
        return json.dumps(data, indent=context.indent or None, ensure_ascii=False)
