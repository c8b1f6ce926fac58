"""Merge evaluator results into a scored ComplianceReport."""

from __future__ import annotations

import math
from typing import Iterable

from adcheck.models.common import Platform
from adcheck.models.finding import CheckOutcome, ComplianceReport, EvaluationResult

CRITICAL_PENALTY = 15
WARNING_PENALTY = 5


def compute_score(total_checks: int, passed_checks: int, critical_violations: int, warnings: int) -> int:
    """Compute the 0-100 compliance score.

    The pass ratio is rounded half up, then each critical violation costs
    CRITICAL_PENALTY points and each warning WARNING_PENALTY points.
    """
    if total_checks > 0:
        base = math.floor(100 * passed_checks / total_checks + 0.5)
    else:
        base = 0

    score = base - CRITICAL_PENALTY * critical_violations - WARNING_PENALTY * warnings
    return max(0, min(100, score))


def aggregate(results: Iterable[EvaluationResult], platform: Platform) -> ComplianceReport:
    """Merge evaluator results, in the order given, into one report."""
    checks: list[CheckOutcome] = []
    for result in results:
        checks.extend(result.outcomes)

    merged = EvaluationResult(evaluator="report", outcomes=checks)
    violations = merged.violations
    warnings = merged.warnings
    critical = merged.critical_violations

    return ComplianceReport(
        platform=platform,
        violations=violations,
        warnings=warnings,
        passed=merged.passed,
        total_checks=merged.total_checks,
        passed_checks=merged.passed_checks,
        critical_violations=critical,
        score=compute_score(merged.total_checks, merged.passed_checks, critical, len(warnings)),
        approved=critical == 0 and not violations,
        checks=checks,
    )
