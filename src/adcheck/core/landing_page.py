"""Rules applied to the landing page URL and its extracted content."""

from __future__ import annotations

import re
from urllib.parse import SplitResult, urlsplit

from adcheck.core.matching import MatchStrategy, find_terms, search_pattern
from adcheck.core.text import FAIR_HOUSING_CITATION, quote_terms
from adcheck.models.catalog import PolicyCatalog
from adcheck.models.common import Platform, Severity
from adcheck.models.content import PageContent, PageFetchError, PageTimeout
from adcheck.models.finding import CheckOutcome, EvaluationResult, Finding
from adcheck.utils.errors import ValidationError

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*$")
_HOST_SCHEMES = ("http", "https", "ftp", "ws", "wss")


def parse_landing_url(url: str) -> SplitResult:
    """Parse and validate a landing page URL.

    Args:
        url: URL to parse

    Returns:
        The split URL

    Raises:
        ValidationError: If the URL is malformed
    """
    candidate = url.strip() if url else ""

    try:
        parts = urlsplit(candidate)
        # Port parsing is lazy; force it so a bad port is reported here.
        _ = parts.port
    except ValueError as e:
        raise ValidationError(f"Invalid URL {url!r}: {e}", field="url") from e

    if not parts.scheme or not _SCHEME.match(parts.scheme):
        raise ValidationError(f"Invalid URL {url!r}: missing protocol", field="url")

    if parts.scheme.lower() in _HOST_SCHEMES:
        if not parts.hostname:
            raise ValidationError(f"Invalid URL {url!r}: missing host", field="url")
        if any(ch.isspace() for ch in parts.netloc):
            raise ValidationError(f"Invalid URL {url!r}: whitespace in host", field="url")

    return parts


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def _invalid_url() -> CheckOutcome:
    return CheckOutcome.violation(
        Finding(
            rule_id="landing_page.url_format",
            title="Invalid URL Format",
            description="Invalid URL. Include https:// protocol.",
            severity=Severity.CRITICAL,
        )
    )


def check_https(parts: SplitResult, platform: Platform) -> CheckOutcome:
    rule_id = "landing_page.https"

    if parts.scheme.lower() == "https":
        return CheckOutcome.passed(
            rule_id,
            Finding(
                rule_id=rule_id,
                title="Secure HTTPS Connection",
                description="Landing page uses HTTPS protocol.",
            ),
        )

    if platform.includes_google:
        return CheckOutcome.violation(
            Finding(
                rule_id=rule_id,
                title="Insecure Landing Page - HTTPS Required",
                description="Google Ads REQUIRES HTTPS. Your URL uses HTTP which will be rejected.",
                severity=Severity.CRITICAL,
                policy="Google Ads - Landing Page Requirements",
            )
        )

    return CheckOutcome.warning(
        Finding(
            rule_id=rule_id,
            title="Insecure Connection (HTTP)",
            description="HTTPS is strongly recommended.",
            severity=Severity.HIGH,
        )
    )


def check_contact_info(content: PageContent) -> CheckOutcome:
    rule_id = "landing_page.contact_info"

    methods = []
    if content.has_phone_number:
        methods.append("phone")
    if content.has_email:
        methods.append("email")
    if content.has_contact_form:
        methods.append("contact form")

    if not methods:
        return CheckOutcome.violation(
            Finding(
                rule_id=rule_id,
                title="Missing Contact Information",
                description="Landing page MUST have contact information (phone, email, or form).",
                severity=Severity.CRITICAL,
                policy="Both platforms - Transparency",
            )
        )

    return CheckOutcome.passed(
        rule_id,
        Finding(
            rule_id=rule_id,
            title="Contact Information Present",
            description=f"Includes: {', '.join(methods)}.",
        ),
    )


def check_privacy_policy(content: PageContent, platform: Platform) -> CheckOutcome:
    rule_id = "landing_page.privacy_policy"

    if content.has_privacy_policy:
        return CheckOutcome.passed(
            rule_id,
            Finding(
                rule_id=rule_id,
                title="Privacy Policy Found",
                description="Landing page includes privacy policy.",
            ),
        )

    if platform.includes_google:
        return CheckOutcome.violation(
            Finding(
                rule_id=rule_id,
                title="Missing Privacy Policy (Google Required)",
                description="Google Ads REQUIRES a visible privacy policy link.",
                severity=Severity.CRITICAL,
                policy="Google Ads - Privacy Policy",
            )
        )

    return CheckOutcome.warning(
        Finding(
            rule_id=rule_id,
            title="Privacy Policy Not Detected",
            description="Privacy policy highly recommended.",
            severity=Severity.HIGH,
        )
    )


def check_content_depth(content: PageContent, catalog: PolicyCatalog) -> CheckOutcome:
    rule_id = "landing_page.content_depth"
    words = count_words(content.body_text)
    limits = catalog.landing_page

    if words < limits.min_words:
        return CheckOutcome.warning(
            Finding(
                rule_id=rule_id,
                title="Thin Content",
                description=f"Very little content ({words} words). Add more details.",
                severity=Severity.HIGH,
            )
        )
    if words < limits.adequate_words:
        return CheckOutcome.warning(
            Finding(
                rule_id=rule_id,
                title="Limited Content",
                description=f"Minimal content ({words} words).",
                severity=Severity.MEDIUM,
            )
        )

    return CheckOutcome.passed(
        rule_id,
        Finding(rule_id=rule_id, title="Adequate Content", description=f"{words} words of content."),
    )


def check_images(content: PageContent, catalog: PolicyCatalog) -> CheckOutcome:
    rule_id = "landing_page.images"
    images = content.images

    if images == 0:
        return CheckOutcome.warning(
            Finding(
                rule_id=rule_id,
                title="No Images Found",
                description="Include high-quality property images.",
                severity=Severity.HIGH,
            )
        )
    if images < catalog.landing_page.min_images:
        return CheckOutcome.warning(
            Finding(
                rule_id=rule_id,
                title="Few Images",
                description=f"Only {images} image(s). Add more.",
                severity=Severity.MEDIUM,
            )
        )

    return CheckOutcome.passed(
        rule_id,
        Finding(rule_id=rule_id, title="Images Present", description=f"{images} images found."),
    )


def check_discriminatory_content(
    content: PageContent, catalog: PolicyCatalog, strategy: MatchStrategy
) -> CheckOutcome:
    rule_id = "landing_page.discriminatory_content"
    found = find_terms(content.body_text, catalog.prohibited_terms, strategy)

    if found:
        return CheckOutcome.violation(
            Finding(
                rule_id=rule_id,
                title="Discriminatory Content on Landing Page",
                description=f"Found: {quote_terms(found)}. Violates Fair Housing Act.",
                severity=Severity.CRITICAL,
                policy=FAIR_HOUSING_CITATION,
            )
        )

    return CheckOutcome.passed(
        rule_id,
        Finding(
            rule_id=rule_id,
            title="No Discriminatory Content",
            description="Landing page complies with Fair Housing Act.",
        ),
    )


def check_pricing(
    content: PageContent,
    catalog: PolicyCatalog,
    strategy: MatchStrategy = MatchStrategy.SUBSTRING,
) -> CheckOutcome:
    rule_id = "landing_page.pricing"

    if catalog.pricing_pattern and search_pattern(content.body_text, catalog.pricing_regex, strategy):
        return CheckOutcome.passed(
            rule_id,
            Finding(
                rule_id=rule_id,
                title="Pricing Information Found",
                description="Includes pricing details.",
            ),
        )

    return CheckOutcome.warning(
        Finding(
            rule_id=rule_id,
            title="No Pricing Information",
            description="Display pricing or price range for transparency.",
            severity=Severity.MEDIUM,
        )
    )


def _timeout(content: PageTimeout) -> CheckOutcome:
    return CheckOutcome.violation(
        Finding(
            rule_id="landing_page.load_timeout",
            title="Page Load Timeout",
            description=f"{content.message}. Target: <3 seconds.",
            severity=Severity.CRITICAL,
            policy="Both platforms - Page Experience",
        )
    )


def _not_accessible(content: PageFetchError) -> CheckOutcome:
    return CheckOutcome.violation(
        Finding(
            rule_id="landing_page.not_accessible",
            title="Landing Page Not Accessible",
            description=f"Unable to load landing page ({content.message}). Ad will be rejected.",
            severity=Severity.CRITICAL,
        )
    )


def evaluate_landing_page(
    url: str,
    platform: Platform,
    content: PageContent | PageTimeout | PageFetchError | None,
    catalog: PolicyCatalog,
    strategy: MatchStrategy = MatchStrategy.SUBSTRING,
) -> EvaluationResult:
    """Evaluate a landing page URL and its pre-fetched content.

    A malformed URL yields a single critical outcome and stops this
    evaluator. Without content only the HTTPS rule runs.

    Args:
        url: Landing page URL
        platform: Platform whose gated rules apply
        content: Content variant produced by the fetcher, if any
        catalog: Policy catalog
        strategy: Phrase matching strategy

    Returns:
        EvaluationResult with one outcome per executed rule
    """
    try:
        parts = parse_landing_url(url)
    except ValidationError:
        return EvaluationResult(evaluator="landing_page", outcomes=[_invalid_url()])

    outcomes = [check_https(parts, platform)]

    if isinstance(content, PageContent):
        outcomes.extend(
            [
                check_contact_info(content),
                check_privacy_policy(content, platform),
                check_content_depth(content, catalog),
                check_images(content, catalog),
                check_discriminatory_content(content, catalog, strategy),
                check_pricing(content, catalog, strategy),
            ]
        )
    elif isinstance(content, PageTimeout):
        outcomes.append(_timeout(content))
    elif isinstance(content, PageFetchError):
        outcomes.append(_not_accessible(content))

    return EvaluationResult(evaluator="landing_page", outcomes=outcomes)
