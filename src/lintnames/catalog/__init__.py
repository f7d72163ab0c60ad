"""Catalogs of well-known names: built-in and loaded from YAML."""

from lintnames.catalog.loader import build_catalog, load_catalog
from lintnames.catalog.schemas import Catalog, merge_catalogs
from lintnames.catalog.well_known import RUNTIME_CATALOG, Runtime

__all__ = [
    "RUNTIME_CATALOG",
    "Catalog",
    "Runtime",
    "build_catalog",
    "load_catalog",
    "merge_catalogs",
]
