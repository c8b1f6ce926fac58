"""Rules applied to ad image metadata."""

from __future__ import annotations

import math

from adcheck.models.catalog import PolicyCatalog
from adcheck.models.common import Platform, Severity
from adcheck.models.content import ImageInfo
from adcheck.models.finding import CheckOutcome, EvaluationResult, Finding

MEBIBYTE = 1024 * 1024


def size_in_mb(size: int) -> int:
    """Size in MB, rounded half up."""
    return math.floor(size / MEBIBYTE + 0.5)


def check_size(image: ImageInfo, catalog: PolicyCatalog) -> CheckOutcome:
    rule_id = "image.size"

    if image.size > catalog.image.max_size_bytes:
        return CheckOutcome.warning(
            Finding(
                rule_id=rule_id,
                title="Large Image File",
                description=f"Image is {size_in_mb(image.size)}MB. Compress to <2MB.",
                severity=Severity.MEDIUM,
            )
        )
    return CheckOutcome.passed(rule_id)


def check_format(image: ImageInfo, catalog: PolicyCatalog) -> CheckOutcome:
    rule_id = "image.format"

    if image.type not in catalog.image.accepted_types:
        return CheckOutcome.violation(
            Finding(
                rule_id=rule_id,
                title="Unsupported Image Format",
                description="Use JPG, PNG, or WebP.",
                severity=Severity.HIGH,
            )
        )

    return CheckOutcome.passed(
        rule_id,
        Finding(
            rule_id=rule_id,
            title="Valid Image Format",
            description=f"Format ({image.type}) supported.",
        ),
    )


def check_text_overlay(catalog: PolicyCatalog) -> CheckOutcome:
    # Text coverage cannot be measured from metadata, so this is always surfaced.
    limit = catalog.meta.image_text_limit
    return CheckOutcome.warning(
        Finding(
            rule_id="image.meta_text_overlay",
            title=f"Meta Image Text Policy ({limit}% Rule)",
            description=f"Ensure text in image is <{limit}% of area. Use Meta Text Overlay Tool.",
            severity=Severity.HIGH,
        )
    )


def evaluate_image(image: ImageInfo, platform: Platform, catalog: PolicyCatalog) -> EvaluationResult:
    """Evaluate ad image metadata.

    Args:
        image: Image size and MIME type
        platform: Platform whose gated rules apply
        catalog: Policy catalog

    Returns:
        EvaluationResult with one outcome per executed rule
    """
    outcomes = [check_size(image, catalog), check_format(image, catalog)]

    if platform.includes_meta:
        outcomes.append(check_text_overlay(catalog))

    return EvaluationResult(evaluator="image", outcomes=outcomes)
