"""Finding, evaluation and report models."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from adcheck.models.common import Platform, Severity


class CheckStatus(str, Enum):
    """Outcome of a single rule evaluation."""

    PASSED = "passed"
    WARNING = "warning"
    VIOLATION = "violation"


class Finding(BaseModel):
    """A single evaluation outcome shown to the user."""

    model_config = {"frozen": True}

    rule_id: str = Field(description="Identifier of the rule that produced this finding")
    title: str = Field(description="Human-readable label")
    description: str = Field(description="Explanation, may embed matched terms")
    severity: Severity | None = Field(
        default=None,
        description="Severity (absent on passed findings)",
    )
    policy: str | None = Field(default=None, description="Policy citation")


class CheckOutcome(BaseModel):
    """Result of evaluating one rule.

    Every executed rule yields exactly one outcome, so the number of outcomes
    is the number of checks performed. A passed outcome may carry no finding.
    """

    model_config = {"frozen": True}

    rule_id: str = Field(description="Rule identifier")
    status: CheckStatus = Field(description="Rule status")
    finding: Finding | None = Field(default=None, description="Finding to report")

    @model_validator(mode="after")
    def _require_finding_on_failure(self) -> "CheckOutcome":
        if self.status != CheckStatus.PASSED and self.finding is None:
            raise ValueError(f"{self.status.value} outcome for {self.rule_id} needs a finding")
        return self

    @property
    def is_critical(self) -> bool:
        return (
            self.status == CheckStatus.VIOLATION
            and self.finding is not None
            and self.finding.severity == Severity.CRITICAL
        )

    @classmethod
    def passed(cls, rule_id: str, finding: Finding | None = None) -> "CheckOutcome":
        return cls(rule_id=rule_id, status=CheckStatus.PASSED, finding=finding)

    @classmethod
    def warning(cls, finding: Finding) -> "CheckOutcome":
        return cls(rule_id=finding.rule_id, status=CheckStatus.WARNING, finding=finding)

    @classmethod
    def violation(cls, finding: Finding) -> "CheckOutcome":
        return cls(rule_id=finding.rule_id, status=CheckStatus.VIOLATION, finding=finding)


def _findings(outcomes: list[CheckOutcome], status: CheckStatus) -> list[Finding]:
    return [o.finding for o in outcomes if o.status == status and o.finding is not None]


class EvaluationResult(BaseModel):
    """Outcomes produced by one evaluator, in rule order."""

    model_config = {"frozen": True}

    evaluator: str = Field(description="Name of the evaluator")
    outcomes: list[CheckOutcome] = Field(default_factory=list, description="Rule outcomes")

    @property
    def total_checks(self) -> int:
        return len(self.outcomes)

    @property
    def passed_checks(self) -> int:
        return sum(1 for o in self.outcomes if o.status == CheckStatus.PASSED)

    @property
    def critical_violations(self) -> int:
        return sum(1 for o in self.outcomes if o.is_critical)

    @property
    def violations(self) -> list[Finding]:
        return _findings(self.outcomes, CheckStatus.VIOLATION)

    @property
    def warnings(self) -> list[Finding]:
        return _findings(self.outcomes, CheckStatus.WARNING)

    @property
    def passed(self) -> list[Finding]:
        return _findings(self.outcomes, CheckStatus.PASSED)


class ComplianceReport(BaseModel):
    """Aggregated compliance report for one request."""

    model_config = {"frozen": True}

    platform: Platform = Field(description="Platform whose rules were applied")
    violations: list[Finding] = Field(default_factory=list, description="Hard failures")
    warnings: list[Finding] = Field(default_factory=list, description="Soft failures")
    passed: list[Finding] = Field(default_factory=list, description="Successful checks")

    total_checks: int = Field(default=0, ge=0, description="Rules evaluated")
    passed_checks: int = Field(default=0, ge=0, description="Rules passed")
    critical_violations: int = Field(default=0, ge=0, description="Critical violations")

    score: int = Field(default=0, ge=0, le=100, description="Compliance score")
    approved: bool = Field(default=False, description="No violations of any severity")

    checks: list[CheckOutcome] = Field(
        default_factory=list,
        description="Every rule outcome, in evaluation order",
    )

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def findings_for_rule(self, rule_id: str) -> list[Finding]:
        """Get all findings produced by a rule."""
        return [c.finding for c in self.checks if c.rule_id == rule_id and c.finding is not None]

    def outcome_for_rule(self, rule_id: str) -> CheckOutcome | None:
        """Get the first outcome of a rule, if it ran."""
        for check in self.checks:
            if check.rule_id == rule_id:
                return check
        return None
