"""Loading and saving policy catalogs."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from adcheck.knowledge.catalog import DEFAULT_CATALOG
from adcheck.models.catalog import PolicyCatalog
from adcheck.utils.errors import CatalogError
from adcheck.utils.logging import get_logger

logger = get_logger("core.catalog")


def load_catalog(path: Path | str, base: PolicyCatalog = DEFAULT_CATALOG) -> PolicyCatalog:
    """Load a policy catalog from a YAML file.

    Keys missing from the file keep their value from ``base``, so a file
    only needs to list what it changes. Threshold sections are merged
    key by key.

    Args:
        path: Path to the catalog file
        base: Catalog supplying values for missing keys

    Returns:
        PolicyCatalog loaded from file

    Raises:
        CatalogError: If the file cannot be read or is not a valid catalog
    """
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise CatalogError(f"Cannot read catalog file: {e}", path=str(path)) from e
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in catalog file: {e}", path=str(path)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CatalogError("Catalog file must contain a mapping", path=str(path))

    merged = base.model_dump(mode="json")
    for key, value in data.items():
        if key not in merged:
            raise CatalogError(f"Unknown catalog key: {key}", path=str(path))
        if isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value

    try:
        catalog = PolicyCatalog.model_validate(merged)
    except PydanticValidationError as e:
        raise CatalogError(f"Invalid catalog: {e}", path=str(path)) from e

    logger.debug(
        f"Loaded catalog {catalog.name} v{catalog.version} "
        f"with {len(catalog.prohibited_terms)} prohibited terms from {path}"
    )
    return catalog


def save_catalog(catalog: PolicyCatalog, path: Path | str) -> None:
    """Save a policy catalog to a YAML file.

    Args:
        catalog: The catalog to save
        path: Path to save to
    """
    data = catalog.model_dump(mode="json")

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
