"""Data models for adcheck.

All models are Pydantic BaseModel with frozen=True for immutability.
"""

from adcheck.models.common import CheckError, Platform, Severity
from adcheck.models.catalog import (
    ImageLimits,
    LandingPageThresholds,
    MetaThresholds,
    PolicyCatalog,
)
from adcheck.models.content import (
    ImageInfo,
    LandingPageContent,
    PageContent,
    PageFetchError,
    PageTimeout,
    parse_image_info,
    parse_landing_page_content,
)
from adcheck.models.finding import (
    CheckOutcome,
    CheckStatus,
    ComplianceReport,
    EvaluationResult,
    Finding,
)

__all__ = [
    # Common
    "CheckError",
    "Platform",
    "Severity",
    # Catalog
    "ImageLimits",
    "LandingPageThresholds",
    "MetaThresholds",
    "PolicyCatalog",
    # Inputs
    "ImageInfo",
    "LandingPageContent",
    "PageContent",
    "PageFetchError",
    "PageTimeout",
    "parse_image_info",
    "parse_landing_page_content",
    # Findings
    "CheckOutcome",
    "CheckStatus",
    "ComplianceReport",
    "EvaluationResult",
    "Finding",
]
