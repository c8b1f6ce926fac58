"""ComplianceChecker: runs the evaluators and scores the result."""

from __future__ import annotations

from typing import Any

from adcheck.core.image import evaluate_image
from adcheck.core.landing_page import evaluate_landing_page
from adcheck.core.matching import MatchStrategy
from adcheck.core.scoring import aggregate
from adcheck.core.text import evaluate_ad_text
from adcheck.knowledge.catalog import DEFAULT_CATALOG
from adcheck.models.catalog import PolicyCatalog
from adcheck.models.common import Platform
from adcheck.models.content import (
    ImageInfo,
    PageContent,
    PageFetchError,
    PageTimeout,
    parse_image_info,
    parse_landing_page_content,
)
from adcheck.models.finding import ComplianceReport, EvaluationResult
from adcheck.utils.logging import get_logger

logger = get_logger("core.checker")


class ComplianceChecker:
    """Checks real-estate ad content against the policy catalog.

    Each input is optional. Only evaluators whose input is present run,
    and only they contribute to the check counts and the score.

    Example:
        checker = ComplianceChecker()

        report = checker.check(
            ad_text="Spacious 2BHK, call us today!",
            landing_page_url="https://example.com/listing",
            platform="google",
        )

        if not report.approved:
            for violation in report.violations:
                print(f"{violation.severity}: {violation.title}")
    """

    def __init__(
        self,
        catalog: PolicyCatalog | None = None,
        strategy: MatchStrategy = MatchStrategy.SUBSTRING,
        strict_platform: bool = False,
    ) -> None:
        """Initialize the checker.

        Args:
            catalog: Policy catalog (built-in catalog if None)
            strategy: Phrase matching strategy for term lists
            strict_platform: Reject unknown platform names. By default they
                map to Platform.NONE and no platform-specific rules run
        """
        self._catalog = catalog or DEFAULT_CATALOG
        self._strategy = MatchStrategy(strategy)
        self._strict_platform = strict_platform

    @property
    def catalog(self) -> PolicyCatalog:
        return self._catalog

    @property
    def strategy(self) -> MatchStrategy:
        return self._strategy

    def check(
        self,
        *,
        platform: Platform | str,
        ad_text: str | None = None,
        landing_page_url: str | None = None,
        image_info: ImageInfo | dict[str, Any] | None = None,
        landing_page_content: PageContent | PageTimeout | PageFetchError | dict[str, Any] | None = None,
    ) -> ComplianceReport:
        """Check ad content for compliance.

        Args:
            platform: Platform whose rules apply (meta, google or both)
            ad_text: Ad copy
            landing_page_url: Landing page URL
            image_info: Image size and MIME type
            landing_page_content: Pre-fetched landing page content; only
                used together with landing_page_url

        Returns:
            Scored ComplianceReport

        Raises:
            ValidationError: If image_info or landing_page_content cannot be
                interpreted, or platform is unknown on a strict checker
        """
        platform = Platform.coerce(platform, strict=self._strict_platform)
        results: list[EvaluationResult] = []

        if ad_text:
            results.append(evaluate_ad_text(ad_text, platform, self._catalog, self._strategy))

        if landing_page_url:
            content = None
            if landing_page_content is not None:
                content = parse_landing_page_content(landing_page_content)
            results.append(
                evaluate_landing_page(landing_page_url, platform, content, self._catalog, self._strategy)
            )

        if image_info is not None:
            results.append(evaluate_image(parse_image_info(image_info), platform, self._catalog))

        for result in results:
            logger.debug(
                f"{result.evaluator}: {result.passed_checks}/{result.total_checks} checks passed, "
                f"{len(result.violations)} violations, {len(result.warnings)} warnings"
            )

        report = aggregate(results, platform)
        logger.info(
            f"Compliance score {report.score} for platform {platform.value} "
            f"({'approved' if report.approved else 'not approved'})"
        )
        return report


def check_compliance(
    *,
    platform: Platform | str,
    ad_text: str | None = None,
    landing_page_url: str | None = None,
    image_info: ImageInfo | dict[str, Any] | None = None,
    landing_page_content: PageContent | PageTimeout | PageFetchError | dict[str, Any] | None = None,
    catalog: PolicyCatalog | None = None,
    strategy: MatchStrategy = MatchStrategy.SUBSTRING,
    strict_platform: bool = False,
) -> ComplianceReport:
    """Check ad content with a one-off ComplianceChecker."""
    checker = ComplianceChecker(catalog=catalog, strategy=strategy, strict_platform=strict_platform)
    return checker.check(
        platform=platform,
        ad_text=ad_text,
        landing_page_url=landing_page_url,
        image_info=image_info,
        landing_page_content=landing_page_content,
    )
