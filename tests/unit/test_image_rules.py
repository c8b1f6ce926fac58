"""Unit tests for the ad image rules."""

import pytest

from adcheck.core.image import MEBIBYTE, evaluate_image, size_in_mb
from adcheck.models.common import Platform, Severity
from adcheck.models.content import ImageInfo
from adcheck.models.finding import CheckStatus


class TestImageSize:
    """Tests for the size rule."""

    def test_small_image_passes_silently(self, catalog, valid_image):
        """Images under the limit pass without a finding."""
        result = evaluate_image(valid_image, Platform.GOOGLE, catalog)
        size = result.outcomes[0]

        assert size.rule_id == "image.size"
        assert size.status == CheckStatus.PASSED
        assert size.finding is None

    def test_exact_limit_passes(self, catalog):
        """The limit itself is allowed."""
        image = ImageInfo(size=5 * MEBIBYTE, type="image/png")
        result = evaluate_image(image, Platform.GOOGLE, catalog)
        assert result.outcomes[0].status == CheckStatus.PASSED

    def test_large_image_warns(self, catalog):
        """Images over the limit get a medium warning with the rounded size."""
        image = ImageInfo(size=6 * MEBIBYTE, type="image/png")
        result = evaluate_image(image, Platform.GOOGLE, catalog)
        size = result.outcomes[0]

        assert size.status == CheckStatus.WARNING
        assert size.finding.severity == Severity.MEDIUM
        assert size.finding.description == "Image is 6MB. Compress to <2MB."

    @pytest.mark.parametrize(
        "size,expected",
        [
            (MEBIBYTE * 5 + MEBIBYTE // 2, 6),
            (MEBIBYTE * 5 + MEBIBYTE // 2 - 1, 5),
            (MEBIBYTE * 5 + 1, 5),
            (MEBIBYTE // 2, 1),
        ],
    )
    def test_size_rounds_half_up(self, size, expected):
        """Sizes are rounded to the nearest MB, halves going up."""
        assert size_in_mb(size) == expected


class TestImageFormat:
    """Tests for the format rule."""

    @pytest.mark.parametrize("mime", ["image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"])
    def test_accepted_formats(self, catalog, mime):
        """Accepted MIME types pass with a finding naming the type."""
        result = evaluate_image(ImageInfo(size=1000, type=mime), Platform.GOOGLE, catalog)
        fmt = result.outcomes[1]

        assert fmt.status == CheckStatus.PASSED
        assert fmt.finding.description == f"Format ({mime}) supported."

    @pytest.mark.parametrize("mime", ["image/bmp", "image/tiff", "application/pdf", "IMAGE/PNG"])
    def test_rejected_formats(self, catalog, mime):
        """Other types are a high violation."""
        result = evaluate_image(ImageInfo(size=1000, type=mime), Platform.GOOGLE, catalog)
        fmt = result.outcomes[1]

        assert fmt.status == CheckStatus.VIOLATION
        assert fmt.finding.severity == Severity.HIGH
        assert fmt.finding.description == "Use JPG, PNG, or WebP."


class TestTextOverlay:
    """Tests for the Meta text overlay reminder."""

    def test_meta_always_warns(self, catalog, valid_image):
        """Meta always gets the 20% rule reminder."""
        result = evaluate_image(valid_image, Platform.META, catalog)

        assert result.total_checks == 3
        overlay = result.outcomes[2]
        assert overlay.status == CheckStatus.WARNING
        assert overlay.finding.title == "Meta Image Text Policy (20% Rule)"
        assert overlay.finding.severity == Severity.HIGH

    def test_limit_from_catalog(self, small_catalog, valid_image):
        """The percentage comes from the catalog."""
        result = evaluate_image(valid_image, Platform.BOTH, small_catalog)
        assert result.outcomes[2].finding.title == "Meta Image Text Policy (10% Rule)"

    def test_google_skips_overlay(self, catalog, valid_image):
        """Google checks only size and format."""
        result = evaluate_image(valid_image, Platform.GOOGLE, catalog)
        assert [o.rule_id for o in result.outcomes] == ["image.size", "image.format"]
