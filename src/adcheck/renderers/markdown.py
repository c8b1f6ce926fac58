"""Markdown renderer for compliance reports."""

from __future__ import annotations

from adcheck.models.finding import ComplianceReport, Finding
from adcheck.renderers.base import BaseRenderer, OutputFormat, RenderContext


class MarkdownRenderer(BaseRenderer):
    """Renderer for Markdown output format.

    Example:
        renderer = MarkdownRenderer()
        md_str = renderer.render(report, context)
    """

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.MARKDOWN

    def render(self, report: ComplianceReport, context: RenderContext) -> str:
        status = "✅ Approved" if report.approved else "❌ Not approved"

        lines = [
            "# Ad Compliance Report",
            "",
            f"**Platform:** {report.platform.value}",
            f"**Score:** {report.score}/100",
            f"**Status:** {status}",
            "",
            "## Summary",
            "",
            f"- Checks run: **{report.total_checks}**",
            f"- Checks passed: {report.passed_checks}",
            f"- Violations: **{len(report.violations)}** ({report.critical_violations} critical)",
            f"- Warnings: {len(report.warnings)}",
            "",
        ]

        if report.violations:
            lines.extend(["## Violations", ""])
            lines.extend(self._findings_table(report.violations))

        if report.warnings:
            lines.extend(["## Warnings", ""])
            lines.extend(self._findings_table(report.warnings))

        if context.verbose and report.passed:
            lines.extend(["## Passed Checks", ""])
            for finding in report.passed:
                lines.append(f"- **{finding.title}**: {finding.description}")
            lines.append("")

        return "\n".join(lines)

    def _findings_table(self, findings: list[Finding]) -> list[str]:
        lines = [
            "| Severity | Finding | Details | Policy |",
            "|----------|---------|---------|--------|",
        ]
        for f in findings:
            severity = f.severity.value.upper() if f.severity else "-"
            lines.append(
                f"| {severity} | {self._escape_md(f.title)} | "
                f"{self._escape_md(f.description)} | {self._escape_md(f.policy or '-')} |"
            )
        lines.append("")
        return lines

    @staticmethod
    def _escape_md(text: str) -> str:
        """Escape special Markdown characters."""
        if not text:
            return text
        return text.replace("|", "\\|").replace("\n", " ")
