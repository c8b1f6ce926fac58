"""Shared test fixtures for adcheck tests."""

import pytest

from adcheck.core.checker import ComplianceChecker
from adcheck.knowledge.catalog import DEFAULT_CATALOG
from adcheck.models.catalog import MetaThresholds, PolicyCatalog
from adcheck.models.content import ImageInfo, PageContent
from adcheck.utils.config import get_default_config, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Keep user config files out of the tests."""
    set_config(get_default_config())
    yield
    set_config(get_default_config())


@pytest.fixture
def catalog() -> PolicyCatalog:
    """The built-in policy catalog."""
    return DEFAULT_CATALOG


@pytest.fixture
def small_catalog() -> PolicyCatalog:
    """A tiny catalog for tests that should not depend on the built-in lists."""
    return PolicyCatalog(
        name="small",
        version="0.0.1",
        prohibited_terms=["no pets", "adults only"],
        superlatives=["best"],
        financial_terms=["loan"],
        government_terms=["official"],
        cta_terms=["call"],
        pricing_pattern=r"price",
        meta=MetaThresholds(image_text_limit=10, max_consecutive_caps=1),
    )


@pytest.fixture
def checker() -> ComplianceChecker:
    """A checker using the built-in catalog."""
    return ComplianceChecker()


@pytest.fixture
def good_page() -> PageContent:
    """Landing page content that passes every content rule."""
    body = " ".join(["spacious"] * 300) + " Price starting from 45 lac. Call +91 98765 43210."
    return PageContent(
        title="Sunrise Residency",
        meta_description="Spacious 3BHK apartments",
        headings=["Sunrise Residency"],
        body_text=body,
        has_contact_form=True,
        has_phone_number=True,
        has_email=False,
        has_privacy_policy=True,
        has_terms=True,
        images=5,
        forms=1,
        links=12,
        protocol="https:",
    )


@pytest.fixture
def bare_page() -> PageContent:
    """Landing page content that fails or warns on every content rule."""
    return PageContent(
        title="Coming soon",
        body_text="lovely home " * 20,
        images=0,
        protocol="https:",
    )


@pytest.fixture
def valid_image() -> ImageInfo:
    """A small PNG."""
    return ImageInfo(size=200 * 1024, type="image/png")


@pytest.fixture
def sample_html() -> str:
    """A small landing page."""
    return """
<html>
  <head>
    <title> Sunrise Residency </title>
    <meta name="description" content="Luxury 3BHK flats">
  </head>
  <body>
    <h1>Sunrise Residency</h1>
    <h2>   </h2>
    <h3>Amenities</h3>
    <p>Call us at +91 98765 43210 or mail sales@sunrise.example</p>
    <form><input name="name"></form>
    <img src="a.jpg"><img src="b.jpg">
    <a href="/privacy">Privacy</a>
    <a href="/terms-of-use">Terms</a>
  </body>
</html>
"""


@pytest.fixture
def sample_catalog_file(tmp_path) -> str:
    """A catalog YAML that overrides a few values."""
    content = """
name: regional
version: "2.0.0"
prohibited_terms:
  - No Bachelors
  - family only
meta:
  max_consecutive_caps: 5
"""
    path = tmp_path / "catalog.yaml"
    path.write_text(content)
    return str(path)
