"""Tests for the built-in runtime names."""

from __future__ import annotations

from lintnames.catalog.well_known import RUNTIME_CATALOG, Runtime


def test_runtime_package() -> None:
    assert Runtime.PACKAGE.java_package_name == "androidx.compose.runtime"


def test_composable() -> None:
    assert Runtime.COMPOSABLE.qualified_name == (
        "androidx.compose.runtime.Composable"
    )
    assert Runtime.COMPOSABLE.internal_class_name == (
        "androidx/compose/runtime/Composable"
    )
    assert Runtime.COMPOSABLE.short_name == "Composable"


def test_remember_is_lowercase_function() -> None:
    assert Runtime.REMEMBER.short_name == "remember"
    assert Runtime.REMEMBER.qualified_name == (
        "androidx.compose.runtime.remember"
    )


def test_runtime_catalog_order() -> None:
    assert RUNTIME_CATALOG.qualified_names() == (
        "androidx.compose.runtime.Composable",
        "androidx.compose.runtime.CompositionLocal",
        "androidx.compose.runtime.remember",
    )
    assert Runtime.COMPOSITION_LOCAL in RUNTIME_CATALOG
