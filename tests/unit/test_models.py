"""Unit tests for the data models."""

import pydantic
import pytest

from adcheck.models.common import CheckError, Platform
from adcheck.models.content import (
    ImageInfo,
    PageContent,
    PageFetchError,
    PageTimeout,
    parse_image_info,
    parse_landing_page_content,
)
from adcheck.models.finding import CheckOutcome, CheckStatus, Finding
from adcheck.utils.errors import ValidationError


class TestPlatform:
    """Tests for the Platform enum."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("meta", Platform.META),
            ("GOOGLE", Platform.GOOGLE),
            (" Both ", Platform.BOTH),
            (Platform.META, Platform.META),
        ],
    )
    def test_coerce(self, value, expected):
        """Names are matched case-insensitively."""
        assert Platform.coerce(value) is expected

    def test_coerce_unknown_strict(self):
        """Unknown names are rejected by default."""
        with pytest.raises(ValidationError) as exc_info:
            Platform.coerce("tiktok")
        assert exc_info.value.details == {"field": "platform"}

    def test_coerce_unknown_lenient(self):
        """Lenient coercion maps unknown names to NONE."""
        assert Platform.coerce("tiktok", strict=False) is Platform.NONE

    @pytest.mark.parametrize(
        "platform,meta,google",
        [
            (Platform.META, True, False),
            (Platform.GOOGLE, False, True),
            (Platform.BOTH, True, True),
            (Platform.NONE, False, False),
        ],
    )
    def test_includes(self, platform, meta, google):
        """BOTH includes each platform's rules."""
        assert platform.includes_meta is meta
        assert platform.includes_google is google


class TestCheckOutcome:
    """Tests for CheckOutcome."""

    def test_warning_requires_finding(self):
        """Only passed outcomes may omit the finding."""
        with pytest.raises(pydantic.ValidationError):
            CheckOutcome(rule_id="x", status=CheckStatus.WARNING)

    def test_passed_without_finding(self):
        """A silent pass has no finding."""
        outcome = CheckOutcome.passed("x")
        assert outcome.finding is None
        assert not outcome.is_critical

    def test_is_critical(self):
        """Only critical violations count as critical."""
        critical = Finding(rule_id="x", title="t", description="d", severity="critical")
        assert CheckOutcome.violation(critical).is_critical
        assert not CheckOutcome.warning(critical).is_critical

    def test_frozen(self):
        """Findings are immutable."""
        finding = Finding(rule_id="x", title="t", description="d")
        with pytest.raises(pydantic.ValidationError):
            finding.title = "changed"


class TestCheckError:
    """Tests for CheckError."""

    def test_str(self):
        """String form includes the code."""
        assert str(CheckError(code="FETCH_ERROR", message="boom")) == "[FETCH_ERROR] boom"


class TestParseLandingPageContent:
    """Tests for parse_landing_page_content."""

    def test_success_shape(self):
        """The scraper's camelCase success shape parses to PageContent."""
        content = parse_landing_page_content(
            {
                "success": True,
                "title": "Listing",
                "bodyText": "Spacious flat",
                "hasEmail": True,
                "hasPrivacyPolicy": True,
                "images": 2,
                "protocol": "https:",
            }
        )

        assert isinstance(content, PageContent)
        assert content.body_text == "Spacious flat"
        assert content.has_email
        assert content.has_privacy_policy
        assert content.images == 2

    def test_timeout_shape(self):
        """success false plus timeout true parses to PageTimeout."""
        content = parse_landing_page_content(
            {"success": False, "timeout": True, "message": "Page took too long to load (>10 seconds)"}
        )

        assert isinstance(content, PageTimeout)
        assert content.message == "Page took too long to load (>10 seconds)"

    def test_error_shape(self):
        """success false plus error true parses to PageFetchError."""
        content = parse_landing_page_content(
            {"success": False, "error": True, "message": "Server returned 503 error", "statusCode": 503}
        )

        assert isinstance(content, PageFetchError)
        assert content.status_code == 503

    def test_kind_shape(self):
        """Dumped variants parse back through their kind."""
        dumped = PageTimeout(message="slow").model_dump()
        assert parse_landing_page_content(dumped) == PageTimeout(message="slow")

    def test_variant_passthrough(self, good_page):
        """An existing variant is returned unchanged."""
        assert parse_landing_page_content(good_page) is good_page

    @pytest.mark.parametrize("data", [{}, {"success": False}, {"success": False, "message": "n/a"}])
    def test_no_flags_means_no_content(self, data):
        """A shape with no kind and no flag set carries no content."""
        assert parse_landing_page_content(data) is None

    @pytest.mark.parametrize(
        "data",
        [
            {"kind": "partial"},
            {"success": True, "images": -1},
            ["not", "a", "dict"],
        ],
    )
    def test_invalid(self, data):
        """Shapes matching no variant raise ValidationError."""
        with pytest.raises(ValidationError):
            parse_landing_page_content(data)


class TestParseImageInfo:
    """Tests for parse_image_info."""

    def test_dict(self):
        """A dict with size and type parses."""
        assert parse_image_info({"size": 10, "type": "image/png"}) == ImageInfo(size=10, type="image/png")

    @pytest.mark.parametrize("data", [{"size": 10}, {"size": -1, "type": "image/png"}, "image.png"])
    def test_invalid(self, data):
        """Missing or negative fields raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            parse_image_info(data)
        assert exc_info.value.code == "VALIDATION_ERROR"
