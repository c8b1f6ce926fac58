"""Main CLI entry point for adcheck."""

import typer
from rich.console import Console

from adcheck.cli import catalog, check, fetch

app = typer.Typer(
    name="adcheck",
    help="Compliance screening for real-estate advertisements.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register subcommands
app.command(name="check")(check.check_cmd)
app.command(name="fetch")(fetch.fetch_cmd)
app.add_typer(catalog.app, name="catalog")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
) -> None:
    """
    adcheck: compliance screening for real-estate advertisements.

    - [bold]check[/bold]: Check ad copy, landing page and image against Fair Housing, Meta and Google rules
    - [bold]fetch[/bold]: Fetch a landing page and extract its content
    - [bold]catalog[/bold]: Inspect or export the policy catalog
    """
    from adcheck.utils.logging import configure_logging

    if verbose:
        configure_logging(level="DEBUG", structured=True)
    elif quiet:
        configure_logging(level="ERROR")
    else:
        configure_logging(level="WARNING")


@app.command()
def version() -> None:
    """Show the adcheck version."""
    from adcheck import __version__

    console.print(f"adcheck version {__version__}")


if __name__ == "__main__":
    app()
