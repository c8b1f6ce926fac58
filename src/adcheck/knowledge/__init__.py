"""Real-estate advertising knowledge base.

Contains the curated Fair Housing phrase lists and platform thresholds
that make up the built-in policy catalog.
"""

from adcheck.knowledge.catalog import DEFAULT_CATALOG, get_default_catalog

__all__ = [
    "DEFAULT_CATALOG",
    "get_default_catalog",
]
