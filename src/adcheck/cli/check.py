"""CLI command for checking ad compliance."""

import mimetypes
from pathlib import Path
from typing import Optional

import typer

from adcheck.cli.utils import console, fail, read_json_file, resolve_config
from adcheck.models.content import ImageInfo, parse_image_info
from adcheck.utils.errors import AdCheckError


def _image_from_options(
    image: Optional[Path], image_size: Optional[int], image_type: Optional[str]
) -> ImageInfo | None:
    if image is not None:
        if not image.is_file():
            fail(f"Image file not found: {image}")
        guessed, _ = mimetypes.guess_type(image.name)
        image_size = image.stat().st_size
        image_type = image_type or guessed or "application/octet-stream"
    elif image_size is None and image_type is None:
        return None
    elif image_size is None or image_type is None:
        fail("--image-size and --image-type must be given together")

    try:
        return parse_image_info({"size": image_size, "type": image_type})
    except AdCheckError as e:
        fail(e.message)


def check_cmd(
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Ad copy to check"),
    text_file: Optional[Path] = typer.Option(
        None,
        "--text-file",
        help="Read ad copy from a file",
    ),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Landing page URL"),
    platform: Optional[str] = typer.Option(
        None,
        "--platform",
        "-p",
        help="Ad platform (meta, google, both)",
    ),
    image: Optional[Path] = typer.Option(None, "--image", "-i", help="Ad image file"),
    image_size: Optional[int] = typer.Option(None, "--image-size", help="Ad image size in bytes"),
    image_type: Optional[str] = typer.Option(None, "--image-type", help="Ad image MIME type"),
    content: Optional[Path] = typer.Option(
        None,
        "--content",
        "-c",
        help="JSON file with pre-fetched landing page content",
    ),
    fetch: bool = typer.Option(
        False,
        "--fetch/--no-fetch",
        help="Fetch the landing page before checking",
    ),
    catalog: Optional[Path] = typer.Option(
        None,
        "--catalog",
        help="Path to policy catalog YAML file",
    ),
    word_boundary: bool = typer.Option(
        False,
        "--word-boundary",
        help="Match catalog phrases on word boundaries only",
    ),
    format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (terminal, json, markdown)",
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path"),
    verbose_report: bool = typer.Option(
        False,
        "--show-passed",
        help="Include passed checks in the report",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
) -> None:
    """
    Check ad copy, landing page and image for compliance.

    Applies Fair Housing, Meta and Google Ads rules and prints a
    scored report. Exits with status 1 when the ad is not approved.

    Example:
        adcheck check --text "Spacious 2BHK, call us today!" --url https://example.com --platform google
    """
    from adcheck.core.catalog import load_catalog
    from adcheck.core.checker import ComplianceChecker
    from adcheck.core.matching import MatchStrategy
    from adcheck.fetch.page import PageFetcher
    from adcheck.renderers import OutputFormat, RenderContext, get_renderer
    from adcheck.renderers.terminal import TerminalRenderer

    settings = resolve_config(config)

    if text_file is not None:
        try:
            text = text_file.read_text(encoding="utf-8")
        except OSError as e:
            fail(f"Cannot read {text_file}: {e}")

    image_info = _image_from_options(image, image_size, image_type)

    if not text and not url and image_info is None:
        fail("Nothing to check: give --text, --url or an image")

    try:
        output_format = OutputFormat(format or settings.output.default_format)
    except ValueError:
        fail(f"Invalid format: {format}")

    try:
        policy_catalog = None
        catalog_path = catalog or settings.check.catalog_path
        if catalog_path:
            policy_catalog = load_catalog(catalog_path)

        strategy = MatchStrategy.WORD_BOUNDARY if word_boundary else settings.check.match_strategy
        checker = ComplianceChecker(
            catalog=policy_catalog,
            strategy=strategy,
            strict_platform=settings.check.strict_platform,
        )

        page_content = None
        if content is not None:
            page_content = read_json_file(content)
        elif url and fetch:
            fetcher = PageFetcher(
                timeout=settings.fetch.timeout,
                max_redirects=settings.fetch.max_redirects,
                user_agent=settings.fetch.user_agent,
            )
            with console.status("Fetching landing page..."):
                page_content = fetcher.fetch(url)

        report = checker.check(
            platform=platform or settings.check.default_platform,
            ad_text=text,
            landing_page_url=url,
            image_info=image_info,
            landing_page_content=page_content,
        )
    except AdCheckError as e:
        fail(e.message)

    context = RenderContext(
        format=output_format,
        output_path=output,
        verbose=verbose_report,
        color=settings.output.color,
    )

    if output_format == OutputFormat.TERMINAL:
        renderer = TerminalRenderer(console)
    else:
        renderer = get_renderer(output_format)
    if output:
        renderer.render_to_file(report, context)
        console.print(f"Report written to {output}")
    elif output_format == OutputFormat.JSON:
        console.print_json(renderer.render(report, context))
    else:
        console.print(renderer.render(report, context), markup=False)

    if not report.approved:
        raise typer.Exit(1)
