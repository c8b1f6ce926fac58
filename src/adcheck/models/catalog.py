"""Policy catalog data models."""

import re

from pydantic import BaseModel, Field, field_validator


class MetaThresholds(BaseModel):
    """Meta advertising thresholds."""

    model_config = {"frozen": True}

    image_text_limit: int = Field(default=20, ge=0, le=100, description="Max image area covered by text (%)")
    max_consecutive_caps: int = Field(default=3, ge=0, description="Max all-caps words in ad copy")


class LandingPageThresholds(BaseModel):
    """Landing page content thresholds."""

    model_config = {"frozen": True}

    min_words: int = Field(default=100, ge=0, description="Below this the page is thin")
    adequate_words: int = Field(default=300, ge=0, description="At or above this content is adequate")
    min_images: int = Field(default=3, ge=0, description="Images needed to pass")


class ImageLimits(BaseModel):
    """Ad image limits."""

    model_config = {"frozen": True}

    max_size_bytes: int = Field(default=5 * 1024 * 1024, ge=0, description="Largest accepted file size")
    accepted_types: tuple[str, ...] = Field(
        default=("image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"),
        description="Accepted MIME types",
    )


class PolicyCatalog(BaseModel):
    """Versioned set of rule data used by every evaluator.

    Term lists are tuples of lowercase phrases matched case-insensitively through a
    MatchStrategy; the catalog itself carries no behavior.
    """

    model_config = {"frozen": True}

    name: str = Field(default="builtin", description="Catalog name")
    version: str = Field(default="1.0.0", description="Catalog version")
    description: str = Field(default="", description="Catalog description")

    protected_classes: tuple[str, ...] = Field(
        default=(),
        description="Protected attributes (documentation only)",
    )
    prohibited_terms: tuple[str, ...] = Field(
        default=(),
        description="Fair Housing prohibited phrases",
    )
    superlatives: tuple[str, ...] = Field(default=(), description="Unsubstantiated claim phrases")
    financial_terms: tuple[str, ...] = Field(default=(), description="Terms triggering lending disclosure")
    government_terms: tuple[str, ...] = Field(default=(), description="Government affiliation phrases")
    cta_terms: tuple[str, ...] = Field(default=(), description="Call-to-action phrases")
    pricing_pattern: str = Field(default="", description="Regex detecting pricing information")

    meta: MetaThresholds = Field(default_factory=MetaThresholds)
    landing_page: LandingPageThresholds = Field(default_factory=LandingPageThresholds)
    image: ImageLimits = Field(default_factory=ImageLimits)

    @field_validator(
        "prohibited_terms",
        "superlatives",
        "financial_terms",
        "government_terms",
        "cta_terms",
    )
    @classmethod
    def _lowercase_terms(cls, terms: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(t.strip().lower() for t in terms if t and t.strip())

    @field_validator("pricing_pattern")
    @classmethod
    def _valid_pattern(cls, pattern: str) -> str:
        try:
            re.compile(pattern)
        except re.error as e:
            raise ValueError(f"Invalid pricing pattern: {e}") from e
        return pattern

    @property
    def pricing_regex(self) -> re.Pattern[str]:
        return re.compile(self.pricing_pattern, re.IGNORECASE)
