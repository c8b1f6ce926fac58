"""CLI commands for inspecting and exporting the policy catalog."""

from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel
from rich.table import Table

from adcheck.cli.utils import console, fail

app = typer.Typer(help="Inspect and export the policy catalog.", no_args_is_help=True)


def _load(catalog: Optional[Path]):
    from adcheck.core.catalog import load_catalog
    from adcheck.knowledge.catalog import DEFAULT_CATALOG
    from adcheck.utils.errors import CatalogError

    if catalog is None:
        return DEFAULT_CATALOG
    try:
        return load_catalog(catalog)
    except CatalogError as e:
        fail(e.message)


@app.command("show")
def show_cmd(
    catalog: Optional[Path] = typer.Option(
        None,
        "--catalog",
        help="Path to policy catalog YAML file",
    ),
) -> None:
    """Show the terms and thresholds of a policy catalog."""
    policy = _load(catalog)

    console.print(
        Panel(
            f"[bold]Name:[/bold] {policy.name}\n"
            f"[bold]Version:[/bold] {policy.version}\n"
            f"[bold]Description:[/bold] {policy.description or '-'}",
            title="Policy Catalog",
        )
    )

    table = Table(title="Term Lists")
    table.add_column("List", style="bold")
    table.add_column("Count")
    table.add_column("Terms", max_width=70)
    for label, terms in (
        ("Prohibited (Fair Housing)", policy.prohibited_terms),
        ("Unsubstantiated claims", policy.superlatives),
        ("Financial disclosure", policy.financial_terms),
        ("Government affiliation", policy.government_terms),
        ("Call to action", policy.cta_terms),
    ):
        table.add_row(label, str(len(terms)), ", ".join(terms))
    console.print(table)

    table = Table(title="Thresholds", show_header=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("Meta image text limit", f"{policy.meta.image_text_limit}%")
    table.add_row("Meta max all-caps words", str(policy.meta.max_consecutive_caps))
    table.add_row("Landing page thin below", f"{policy.landing_page.min_words} words")
    table.add_row("Landing page adequate from", f"{policy.landing_page.adequate_words} words")
    table.add_row("Landing page images needed", str(policy.landing_page.min_images))
    table.add_row("Image max size", f"{policy.image.max_size_bytes} bytes")
    table.add_row("Image types", ", ".join(policy.image.accepted_types))
    console.print(table)


@app.command("export")
def export_cmd(
    path: Path = typer.Argument(..., help="Where to write the catalog YAML"),
    catalog: Optional[Path] = typer.Option(
        None,
        "--catalog",
        help="Catalog to export (defaults to the built-in catalog)",
    ),
) -> None:
    """Write a policy catalog to YAML so it can be edited."""
    from adcheck.core.catalog import save_catalog

    policy = _load(catalog)
    save_catalog(policy, path)
    console.print(f"Catalog written to {path}")
