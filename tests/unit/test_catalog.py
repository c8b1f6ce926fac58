"""Unit tests for the policy catalog."""

import pydantic
import pytest

from adcheck.core.catalog import load_catalog, save_catalog
from adcheck.knowledge.catalog import DEFAULT_CATALOG, PROHIBITED_TERMS
from adcheck.models.catalog import PolicyCatalog
from adcheck.utils.errors import CatalogError


class TestDefaultCatalog:
    """Tests for the built-in catalog."""

    def test_thresholds(self):
        """Built-in thresholds match platform rules."""
        assert DEFAULT_CATALOG.meta.image_text_limit == 20
        assert DEFAULT_CATALOG.meta.max_consecutive_caps == 3
        assert DEFAULT_CATALOG.landing_page.min_words == 100
        assert DEFAULT_CATALOG.landing_page.adequate_words == 300
        assert DEFAULT_CATALOG.landing_page.min_images == 3
        assert DEFAULT_CATALOG.image.max_size_bytes == 5 * 1024 * 1024

    def test_terms_are_lowercase(self):
        """Every term list is lowercase."""
        for terms in (
            DEFAULT_CATALOG.prohibited_terms,
            DEFAULT_CATALOG.superlatives,
            DEFAULT_CATALOG.financial_terms,
            DEFAULT_CATALOG.government_terms,
            DEFAULT_CATALOG.cta_terms,
        ):
            assert terms
            assert all(t == t.lower() for t in terms)

    def test_prohibited_terms_kept_in_order(self):
        """The catalog keeps the curated order."""
        assert DEFAULT_CATALOG.prohibited_terms == tuple(PROHIBITED_TERMS)

    def test_frozen(self):
        """The catalog is immutable."""
        with pytest.raises(pydantic.ValidationError):
            DEFAULT_CATALOG.name = "changed"

    def test_term_lists_immutable(self, checker):
        """Term lists cannot be changed in place."""
        with pytest.raises(AttributeError):
            DEFAULT_CATALOG.prohibited_terms.append("call")
        with pytest.raises(AttributeError):
            DEFAULT_CATALOG.image.accepted_types.append("image/bmp")

        report = checker.check(ad_text="Call us", platform="google")
        assert report.approved

    def test_lists_become_tuples(self):
        """Lists given to the catalog are stored as tuples."""
        catalog = PolicyCatalog(cta_terms=["call"])
        assert catalog.cta_terms == ("call",)
        assert catalog.model_dump(mode="json")["cta_terms"] == ["call"]


class TestPolicyCatalog:
    """Tests for PolicyCatalog validation."""

    def test_terms_normalized(self):
        """Terms are stripped and lowercased, blanks dropped."""
        catalog = PolicyCatalog(prohibited_terms=["  No Pets ", "", "ADULTS ONLY"])
        assert catalog.prohibited_terms == ("no pets", "adults only")

    def test_invalid_pricing_pattern(self):
        """An invalid regex is rejected."""
        with pytest.raises(pydantic.ValidationError):
            PolicyCatalog(pricing_pattern="(unclosed")

    def test_pricing_regex_ignores_case(self):
        """The compiled pattern ignores case."""
        catalog = PolicyCatalog(pricing_pattern="price")
        assert catalog.pricing_regex.search("PRICE LIST")


class TestLoadCatalog:
    """Tests for load_catalog."""

    def test_partial_override(self, sample_catalog_file):
        """Keys in the file replace the built-in values, others are kept."""
        catalog = load_catalog(sample_catalog_file)

        assert catalog.name == "regional"
        assert catalog.version == "2.0.0"
        assert catalog.prohibited_terms == ("no bachelors", "family only")
        assert catalog.superlatives == DEFAULT_CATALOG.superlatives

    def test_nested_sections_merge(self, sample_catalog_file):
        """Threshold sections merge key by key."""
        catalog = load_catalog(sample_catalog_file)

        assert catalog.meta.max_consecutive_caps == 5
        assert catalog.meta.image_text_limit == 20

    def test_empty_file(self, tmp_path):
        """An empty file yields the base catalog."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_catalog(path) == DEFAULT_CATALOG

    def test_missing_file(self, tmp_path):
        """A missing file raises CatalogError."""
        with pytest.raises(CatalogError) as exc_info:
            load_catalog(tmp_path / "missing.yaml")
        assert exc_info.value.code == "CATALOG_ERROR"

    @pytest.mark.parametrize(
        "content",
        [
            "prohibited_terms: [unclosed",
            "- just\n- a list\n",
            "unknown_key: 1\n",
            "pricing_pattern: '(unclosed'\n",
            "meta:\n  image_text_limit: 150\n",
        ],
    )
    def test_invalid_file(self, tmp_path, content):
        """Invalid YAML, shapes, keys or values raise CatalogError."""
        path = tmp_path / "bad.yaml"
        path.write_text(content)

        with pytest.raises(CatalogError) as exc_info:
            load_catalog(path)
        assert exc_info.value.details["path"] == str(path)

    def test_save_and_load(self, tmp_path, small_catalog):
        """A saved catalog loads back unchanged."""
        path = tmp_path / "catalog.yaml"
        save_catalog(small_catalog, path)

        assert load_catalog(path) == small_catalog

    def test_saved_unicode_is_readable(self, tmp_path):
        """Non-ASCII patterns are written as-is."""
        path = tmp_path / "catalog.yaml"
        save_catalog(DEFAULT_CATALOG, path)

        assert "₹" in path.read_text(encoding="utf-8")
