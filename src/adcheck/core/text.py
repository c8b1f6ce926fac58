"""Rules applied to ad copy."""

from __future__ import annotations

import re

from adcheck.core.matching import MatchStrategy, any_term, find_terms
from adcheck.models.catalog import PolicyCatalog
from adcheck.models.common import Platform, Severity
from adcheck.models.finding import CheckOutcome, EvaluationResult, Finding

FAIR_HOUSING_CITATION = "Fair Housing Act § 3604(c)"

_UPPERCASE_LETTER = re.compile(r"[A-Z]")


def quote_terms(terms: list[str]) -> str:
    """Format matched terms as a quoted, comma-separated list."""
    return ", ".join(f'"{term}"' for term in terms)


def count_caps_words(text: str) -> int:
    """Count all-caps words in text.

    Words are separated by single spaces. A word counts when it is unchanged
    by upper-casing, is longer than one character and has an uppercase letter.
    """
    return sum(
        1
        for word in text.split(" ")
        if word == word.upper() and len(word) > 1 and _UPPERCASE_LETTER.search(word)
    )


def check_discriminatory_language(
    text: str, catalog: PolicyCatalog, strategy: MatchStrategy
) -> CheckOutcome:
    rule_id = "text.discriminatory_language"
    found = find_terms(text, catalog.prohibited_terms, strategy)

    if found:
        return CheckOutcome.violation(
            Finding(
                rule_id=rule_id,
                title="Fair Housing Act Violation - Discriminatory Language",
                description=(
                    f"CRITICAL: Found prohibited discriminatory terms: {quote_terms(found)}. "
                    "This violates the Fair Housing Act and both Meta and Google Ads policies."
                ),
                severity=Severity.CRITICAL,
                policy=FAIR_HOUSING_CITATION,
            )
        )

    return CheckOutcome.passed(
        rule_id,
        Finding(
            rule_id=rule_id,
            title="No Discriminatory Language Detected",
            description="Ad text complies with Fair Housing Act requirements.",
        ),
    )


def check_special_ad_category() -> CheckOutcome:
    # Informational only: the declaration happens in Ads Manager, not in the copy.
    rule_id = "text.meta_special_ad_category"
    return CheckOutcome.passed(
        rule_id,
        Finding(
            rule_id=rule_id,
            title="Meta Special Ad Category Declaration Required",
            description=(
                'Declare ad under "Housing" special ad category in Meta Ads Manager. '
                "Age: 18-65+, All genders, Min 15-mile radius."
            ),
        ),
    )


def check_capitalization(text: str, catalog: PolicyCatalog) -> CheckOutcome:
    rule_id = "text.capitalization"
    limit = catalog.meta.max_consecutive_caps
    caps = count_caps_words(text)

    if caps > limit:
        return CheckOutcome.violation(
            Finding(
                rule_id=rule_id,
                title="Excessive Capitalization (Meta)",
                description=f"Found {caps} all-caps words. Reduce to {limit} or fewer.",
                severity=Severity.HIGH,
                policy="Meta Advertising Standards",
            )
        )

    return CheckOutcome.passed(
        rule_id,
        Finding(
            rule_id=rule_id,
            title="Appropriate Capitalization",
            description="Text uses appropriate capitalization.",
        ),
    )


def check_unsubstantiated_claims(
    text: str, catalog: PolicyCatalog, strategy: MatchStrategy
) -> CheckOutcome:
    rule_id = "text.unsubstantiated_claims"
    found = find_terms(text, catalog.superlatives, strategy)

    if found:
        return CheckOutcome.warning(
            Finding(
                rule_id=rule_id,
                title="Unsubstantiated Claims",
                description=f"Claims like {quote_terms(found)} require proof and substantiation.",
                severity=Severity.HIGH,
            )
        )
    return CheckOutcome.passed(rule_id)


def check_financial_disclosure(
    text: str, catalog: PolicyCatalog, strategy: MatchStrategy
) -> CheckOutcome:
    rule_id = "text.financial_disclosure"

    if any_term(text, catalog.financial_terms, strategy):
        return CheckOutcome.warning(
            Finding(
                rule_id=rule_id,
                title="Financial Terms Require Full Disclosure",
                description=(
                    "Provide complete disclosure of all terms, rates, and conditions "
                    "(Truth in Lending Act)."
                ),
                severity=Severity.HIGH,
            )
        )
    return CheckOutcome.passed(rule_id)


def check_government_affiliation(
    text: str, catalog: PolicyCatalog, strategy: MatchStrategy
) -> CheckOutcome:
    rule_id = "text.government_affiliation"

    if any_term(text, catalog.government_terms, strategy):
        return CheckOutcome.violation(
            Finding(
                rule_id=rule_id,
                title="Misleading Government Affiliation (Google)",
                description="Ad suggests government affiliation which is prohibited.",
                severity=Severity.CRITICAL,
                policy="Google Ads - Misrepresentation",
            )
        )
    return CheckOutcome.passed(rule_id)


def check_call_to_action(
    text: str, catalog: PolicyCatalog, strategy: MatchStrategy
) -> CheckOutcome:
    rule_id = "text.call_to_action"

    if any_term(text, catalog.cta_terms, strategy):
        return CheckOutcome.passed(
            rule_id,
            Finding(
                rule_id=rule_id,
                title="Clear Call-to-Action Present",
                description="Ad contains a clear call-to-action.",
            ),
        )

    return CheckOutcome.warning(
        Finding(
            rule_id=rule_id,
            title="No Clear Call-to-Action",
            description="Consider adding a CTA to improve performance.",
            severity=Severity.LOW,
        )
    )


def evaluate_ad_text(
    text: str,
    platform: Platform,
    catalog: PolicyCatalog,
    strategy: MatchStrategy = MatchStrategy.SUBSTRING,
) -> EvaluationResult:
    """Evaluate ad copy against the text rules.

    Args:
        text: Ad copy (callers skip empty text)
        platform: Platform whose gated rules apply
        catalog: Policy catalog
        strategy: Phrase matching strategy

    Returns:
        EvaluationResult with one outcome per executed rule
    """
    outcomes = [check_discriminatory_language(text, catalog, strategy)]

    if platform.includes_meta:
        outcomes.append(check_special_ad_category())
        outcomes.append(check_capitalization(text, catalog))

    outcomes.append(check_unsubstantiated_claims(text, catalog, strategy))
    outcomes.append(check_financial_disclosure(text, catalog, strategy))

    if platform.includes_google:
        outcomes.append(check_government_affiliation(text, catalog, strategy))

    outcomes.append(check_call_to_action(text, catalog, strategy))

    return EvaluationResult(evaluator="text", outcomes=outcomes)
