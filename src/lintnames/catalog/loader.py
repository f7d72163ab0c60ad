"""Load catalog YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from lintnames.catalog.schemas import Catalog, merge_catalogs
from lintnames.catalog.well_known import RUNTIME_CATALOG
from lintnames.names import (
    QualifiedIdentifier,
    make_package_path,
    make_qualified_identifier,
)

if TYPE_CHECKING:
    from lintnames.config import Settings

logger = logging.getLogger(__name__)


def load_catalog(path: Path) -> Catalog:
    """Load a catalog from a YAML file of the form::

        packages:
          - package: androidx.compose.runtime
            names: [Composable, CompositionLocal.Key]

    Raises ``FileNotFoundError`` if the file doesn't exist and
    ``ValueError`` if the document doesn't have that shape. Malformed
    dotted names raise ``InvalidIdentifierFormat``; no partial catalog
    is returned.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Catalog not found: {path}"
        raise FileNotFoundError(msg)

    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        msg = f"Catalog {path} is not valid YAML: {exc}"
        raise ValueError(msg) from exc
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        msg = f"Catalog {path} must be a mapping with a 'packages' list"
        raise ValueError(msg)

    entries = raw.get("packages", [])
    if not isinstance(entries, list):
        msg = f"'packages' in catalog {path} must be a list"
        raise ValueError(msg)

    names: list[QualifiedIdentifier] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict) or "package" not in entry:
            msg = f"Entry {i} in catalog {path} has no 'package'"
            raise ValueError(msg)
        declared = entry.get("names")
        if declared is None:
            declared = []
        if not isinstance(declared, list):
            msg = f"'names' of entry {i} in catalog {path} must be a list"
            raise ValueError(msg)

        package = make_package_path(entry["package"])
        names.extend(
            make_qualified_identifier(package, name) for name in declared
        )

    catalog = Catalog(names=tuple(names), source=str(path))
    logger.debug("Loaded %d names from %s", len(catalog), path)
    return catalog


def build_catalog(settings: Settings) -> Catalog:
    """Return the built-in names followed by every configured catalog file."""
    extra = [load_catalog(p) for p in settings.catalog_files]
    return merge_catalogs(RUNTIME_CATALOG, *extra)
