"""Common names used by lint checks."""

from __future__ import annotations

from lintnames.catalog.schemas import Catalog
from lintnames.names import make_package_path, make_qualified_identifier


class Runtime:
    """Names from ``androidx.compose.runtime``."""

    PACKAGE = make_package_path("androidx.compose.runtime")

    COMPOSABLE = make_qualified_identifier(PACKAGE, "Composable")
    COMPOSITION_LOCAL = make_qualified_identifier(PACKAGE, "CompositionLocal")
    REMEMBER = make_qualified_identifier(PACKAGE, "remember")


RUNTIME_CATALOG = Catalog(
    names=(
        Runtime.COMPOSABLE,
        Runtime.COMPOSITION_LOCAL,
        Runtime.REMEMBER,
    ),
    source="builtin:runtime",
)
