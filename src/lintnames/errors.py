"""Construction-time errors for malformed identifiers.

A malformed well-known name would silently match nothing and produce
false negatives downstream, so these are raised immediately and never
recovered from inside the library.
"""

from __future__ import annotations


class InvalidIdentifierFormat(ValueError):
    """A dotted name or segment sequence violates the identifier shape."""

    def __init__(self, value: object, reason: str) -> None:
        super().__init__(f"Invalid identifier {value!r}: {reason}")
        self.value = value
        self.reason = reason
