"""Shared constants: separators and rendering styles.

StrEnum members are str-compatible, so CLI arguments and JSON output
work with them unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── Separators ───────────────────────────────────────────

DOT = "."
SLASH = "/"

# Characters that may never appear inside a single segment
SEPARATORS: frozenset[str] = frozenset({DOT, SLASH})


# ── String Enums ─────────────────────────────────────────


class NameStyle(StrEnum):
    """Output encodings for package paths and qualified identifiers."""

    JAVA = "java"  # a.b.Outer.Inner
    INTERNAL_CLASS = "internal"  # a/b/Outer.Inner (class-metadata readers)


# Separator placed between package segments, per style
PACKAGE_SEPARATORS: dict[NameStyle, str] = {
    NameStyle.JAVA: DOT,
    NameStyle.INTERNAL_CLASS: SLASH,
}
