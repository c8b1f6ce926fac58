"""CLI command for fetching landing page content."""

from pathlib import Path
from typing import Optional

import typer

from adcheck.cli.utils import console, fail, output_json, resolve_config


def fetch_cmd(
    url: str = typer.Argument(..., help="Landing page URL"),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Request timeout in seconds",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write content JSON to this file",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
) -> None:
    """
    Fetch a landing page and print its extracted content.

    The JSON output can be passed to `adcheck check --content`.

    Example:
        adcheck fetch https://example.com/listing -o page.json
    """
    from adcheck.fetch.page import PageFetcher
    from adcheck.models.content import PageContent
    from adcheck.utils.errors import FetchError

    settings = resolve_config(config)
    fetcher = PageFetcher(
        timeout=timeout or settings.fetch.timeout,
        max_redirects=settings.fetch.max_redirects,
        user_agent=settings.fetch.user_agent,
    )

    try:
        with console.status("Fetching landing page..."):
            content = fetcher.fetch(url)
    except FetchError as e:
        fail(e.message)

    output_json(content, output)

    if not isinstance(content, PageContent):
        raise typer.Exit(1)
