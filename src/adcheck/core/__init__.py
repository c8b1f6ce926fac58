"""Core rule-evaluation engine for adcheck.

This module provides the main library API for checking ad compliance.
"""

from adcheck.core.catalog import load_catalog, save_catalog
from adcheck.core.checker import ComplianceChecker, check_compliance
from adcheck.core.image import evaluate_image
from adcheck.core.landing_page import evaluate_landing_page, parse_landing_url
from adcheck.core.matching import MatchStrategy, find_terms, search_pattern
from adcheck.core.scoring import aggregate, compute_score
from adcheck.core.text import evaluate_ad_text

__all__ = [
    "ComplianceChecker",
    "check_compliance",
    # Evaluators
    "evaluate_ad_text",
    "evaluate_landing_page",
    "evaluate_image",
    "parse_landing_url",
    # Scoring
    "aggregate",
    "compute_score",
    # Matching
    "MatchStrategy",
    "find_terms",
    "search_pattern",
    # Catalog
    "load_catalog",
    "save_catalog",
]
