"""Terminal renderer for compliance reports."""

from __future__ import annotations

import io

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from adcheck.models.common import Severity
from adcheck.models.finding import ComplianceReport, Finding
from adcheck.renderers.base import BaseRenderer, OutputFormat, RenderContext

SEVERITY_STYLES = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "green",
}


def score_style(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


class TerminalRenderer(BaseRenderer):
    """Renderer for rich terminal output.

    Prints to the console and returns an empty string.

    Example:
        renderer = TerminalRenderer()
        renderer.render(report, context)
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.TERMINAL

    def render(self, report: ComplianceReport, context: RenderContext) -> str:
        self._render_report(report, context)
        return ""

    def render_to_file(self, report: ComplianceReport, context: RenderContext) -> None:
        """Render data to a file as plain text."""
        if context.output_path is None:
            raise ValueError("output_path must be set in context for file rendering")

        file_console = Console(record=True, file=io.StringIO(), force_terminal=context.color, width=120)
        original_console = self._console
        self._console = file_console

        try:
            self.render(report, context)
            output = file_console.export_text(styles=context.color)
            context.output_path.write_text(output, encoding="utf-8")
        finally:
            self._console = original_console

    def _render_report(self, report: ComplianceReport, context: RenderContext) -> None:
        self._console.print()

        if report.approved:
            status = "[bold green]APPROVED[/bold green]"
        else:
            status = "[bold red]NOT APPROVED[/bold red]"
        style = score_style(report.score)

        self._console.print(
            Panel(
                f"[bold]Platform:[/bold] {report.platform.value}\n"
                f"[bold]Score:[/bold] [{style}]{report.score}/100[/{style}]\n"
                f"[bold]Status:[/bold] {status}",
                title="Ad Compliance Report",
            )
        )

        self._console.print()
        table = Table(title="Summary", show_header=False)
        table.add_column("Metric", style="bold")
        table.add_column("Count")
        table.add_row("Checks Run", str(report.total_checks))
        table.add_row("Checks Passed", f"[green]{report.passed_checks}[/green]")
        table.add_row("Violations", f"[red]{len(report.violations)}[/red]")
        table.add_row("Critical", f"[bold red]{report.critical_violations}[/bold red]")
        table.add_row("Warnings", f"[yellow]{len(report.warnings)}[/yellow]")
        self._console.print(table)

        if report.violations:
            self._console.print()
            self._console.print(self._findings_table("Violations", report.violations))

        if report.warnings:
            self._console.print()
            self._console.print(self._findings_table("Warnings", report.warnings))

        if context.verbose and report.passed:
            self._console.print()
            self._console.print("[bold green]Passed Checks[/bold green]")
            for finding in report.passed:
                self._console.print(f"  [green]OK[/green] {escape(finding.title)}")
                self._console.print(f"      [dim]{escape(finding.description)}[/dim]")

        if not report.violations and not report.warnings:
            self._console.print()
            self._console.print("[green]No issues found![/green]")

    @staticmethod
    def _findings_table(title: str, findings: list[Finding]) -> Table:
        table = Table(title=title)
        table.add_column("Severity")
        table.add_column("Finding", style="bold")
        table.add_column("Details")
        table.add_column("Policy", max_width=30)

        for f in findings:
            if f.severity is not None:
                style = SEVERITY_STYLES.get(f.severity, "white")
                severity = f"[{style}]{f.severity.value.upper()}[/{style}]"
            else:
                severity = "-"
            table.add_row(severity, escape(f.title), escape(f.description), escape(f.policy or "-"))

        return table
