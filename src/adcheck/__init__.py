"""adcheck: compliance screening for real-estate advertisements.

This package checks ad copy, landing pages and ad images against
Fair Housing, Meta and Google Ads rules:

- **Text rules**: discriminatory language, capitalization, unsubstantiated
  claims, financial disclosure, government affiliation, call to action
- **Landing page rules**: HTTPS, contact information, privacy policy,
  content depth, images, discriminatory content, pricing
- **Image rules**: file size, format, Meta text overlay
- **Scoring**: a 0-100 compliance score and an approval decision

Usage:
    # Library API
    from adcheck import ComplianceChecker

    checker = ComplianceChecker()
    report = checker.check(
        ad_text="Perfect for young professionals, best prices!",
        landing_page_url="https://example.com/listing",
        platform="both",
    )
    print(report.score, report.approved)

    # Landing page content comes from the fetcher
    from adcheck.fetch import PageFetcher

    content = PageFetcher().fetch("https://example.com/listing")

CLI:
    adcheck check --text <copy> --url <url> --platform <meta|google|both>
    adcheck fetch <url>
    adcheck catalog show
"""

__version__ = "0.1.0"

# Core
from adcheck.core.checker import ComplianceChecker, check_compliance
from adcheck.core.catalog import load_catalog, save_catalog
from adcheck.core.matching import MatchStrategy

# Models (commonly used)
from adcheck.models.common import Platform, Severity
from adcheck.models.catalog import PolicyCatalog
from adcheck.models.content import ImageInfo, PageContent, PageFetchError, PageTimeout
from adcheck.models.finding import CheckOutcome, ComplianceReport, Finding
from adcheck.knowledge.catalog import DEFAULT_CATALOG

# Renderers
from adcheck.renderers.base import OutputFormat, RenderContext, Renderer

__all__ = [
    # Version
    "__version__",
    # Core
    "ComplianceChecker",
    "check_compliance",
    "load_catalog",
    "save_catalog",
    "MatchStrategy",
    # Models
    "Platform",
    "Severity",
    "PolicyCatalog",
    "DEFAULT_CATALOG",
    "ImageInfo",
    "PageContent",
    "PageFetchError",
    "PageTimeout",
    "CheckOutcome",
    "ComplianceReport",
    "Finding",
    # Renderers
    "Renderer",
    "RenderContext",
    "OutputFormat",
]
