"""Frozen catalog of well-known identifiers."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from lintnames.names import QualifiedIdentifier

logger = logging.getLogger(__name__)


def _dedupe(
    names: Iterable[QualifiedIdentifier], *, source: str
) -> tuple[QualifiedIdentifier, ...]:
    seen: set[QualifiedIdentifier] = set()
    result: list[QualifiedIdentifier] = []
    for name in names:
        if name in seen:
            logger.warning(
                "Duplicate name %s in %s (keeping first)",
                name.qualified_name,
                source,
            )
            continue
        seen.add(name)
        result.append(name)
    return tuple(result)


@dataclass(frozen=True)
class Catalog:
    """Ordered, read-only set of identifiers shared for the process lifetime."""

    names: tuple[QualifiedIdentifier, ...] = field(default_factory=tuple)
    source: str = "<memory>"

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "names", _dedupe(self.names, source=self.source)
        )

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[QualifiedIdentifier]:
        return iter(self.names)

    def __contains__(self, item: object) -> bool:
        return item in self.names

    def qualified_names(self) -> tuple[str, ...]:
        return tuple(n.qualified_name for n in self.names)

    def internal_class_names(self) -> tuple[str, ...]:
        return tuple(n.internal_class_name for n in self.names)


def merge_catalogs(*catalogs: Catalog) -> Catalog:
    """Concatenate ``catalogs`` in order; the first occurrence wins."""
    sources = ", ".join(c.source for c in catalogs) or "<empty>"
    return Catalog(
        names=tuple(n for c in catalogs for n in c.names),
        source=sources,
    )
