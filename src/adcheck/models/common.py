"""Common model types shared across modules."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """Severity of a finding."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Platform(str, Enum):
    """Advertising platform whose rules apply.

    ``NONE`` selects neither platform-specific rule set.
    """

    META = "meta"
    GOOGLE = "google"
    BOTH = "both"
    NONE = "none"

    @property
    def includes_meta(self) -> bool:
        return self in (Platform.META, Platform.BOTH)

    @property
    def includes_google(self) -> bool:
        return self in (Platform.GOOGLE, Platform.BOTH)

    @classmethod
    def coerce(cls, value: "Platform | str", strict: bool = True) -> "Platform":
        """Convert a string into a Platform.

        Args:
            value: Platform or platform name (case-insensitive)
            strict: Raise on unknown names instead of mapping them to NONE

        Returns:
            The matching Platform

        Raises:
            ValidationError: If strict and the name is not a known platform
        """
        if isinstance(value, cls):
            return value

        try:
            return cls(str(value).strip().lower())
        except ValueError:
            if not strict:
                return cls.NONE

            from adcheck.utils.errors import ValidationError

            raise ValidationError(
                f"Unknown platform: {value!r} (expected meta, google or both)",
                field="platform",
            )


class CheckError(BaseModel):
    """Represents an error that occurred during a compliance check."""

    model_config = {"frozen": True}

    code: str = Field(description="Error code for programmatic handling")
    message: str = Field(description="Human-readable error message")
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional error context",
    )

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"
