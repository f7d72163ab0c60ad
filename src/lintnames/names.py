"""Package paths and qualified identifiers.

Both types are frozen values validated once in ``__post_init__``; the
``make_*`` functions are the usual way to build them from Java-style
dotted strings such as ``"androidx.compose.runtime"``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from lintnames.constants import DOT, PACKAGE_SEPARATORS, SEPARATORS, NameStyle
from lintnames.errors import InvalidIdentifierFormat


def _validate_segments(
    segments: Iterable[str], *, kind: str
) -> tuple[str, ...]:
    """Return ``segments`` as a tuple, or raise if any is unusable."""
    if isinstance(segments, str):
        raise InvalidIdentifierFormat(
            segments, f"{kind} segments must be a sequence, not a string"
        )
    result = tuple(segments)
    if not result:
        raise InvalidIdentifierFormat(result, f"{kind} has no segments")
    for segment in result:
        if not isinstance(segment, str) or not segment:
            raise InvalidIdentifierFormat(
                result, f"{kind} contains an empty segment"
            )
        if any(sep in segment for sep in SEPARATORS):
            raise InvalidIdentifierFormat(
                result,
                f"{kind} segment {segment!r} contains a separator",
            )
    return result


def _split_dotted(dotted: str, *, kind: str) -> tuple[str, ...]:
    if not isinstance(dotted, str) or not dotted:
        raise InvalidIdentifierFormat(
            dotted, f"{kind} must be a non-empty string"
        )
    parts = dotted.split(DOT)
    if any(not part for part in parts):
        # Leading, trailing or doubled dot
        raise InvalidIdentifierFormat(
            dotted, "empty dot-separated components are not allowed"
        )
    return _validate_segments(parts, kind=kind)


@dataclass(frozen=True)
class PackagePath:
    """Immutable namespace, e.g. ``("androidx", "compose", "runtime")``."""

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "segments",
            _validate_segments(self.segments, kind="package"),
        )

    def render(self, style: NameStyle = NameStyle.JAVA) -> str:
        """Join the segments with the package separator of ``style``."""
        return PACKAGE_SEPARATORS[NameStyle(style)].join(self.segments)

    @property
    def java_package_name(self) -> str:
        """The Java-style package name, separated with ``.``."""
        return self.render(NameStyle.JAVA)

    def __str__(self) -> str:
        return self.java_package_name


@dataclass(frozen=True)
class QualifiedIdentifier:
    """A possibly nested declaration inside a package.

    ``name_segments`` holds more than one element for nested classes,
    e.g. ``("CompositionLocal", "Key")``.
    """

    package: PackagePath
    name_segments: tuple[str, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.package, PackagePath):
            msg = (
                "package must be a PackagePath, "
                f"got {type(self.package).__name__}"
            )
            raise TypeError(msg)
        object.__setattr__(
            self,
            "name_segments",
            _validate_segments(self.name_segments, kind="name"),
        )

    @property
    def short_name(self) -> str:
        """The unqualified name, as it appears at a use site."""
        return self.name_segments[-1]

    def render(self, style: NameStyle = NameStyle.JAVA) -> str:
        # Nested names keep ``.`` in every style; only the package
        # separator changes.
        style = NameStyle(style)
        sep = PACKAGE_SEPARATORS[style]
        return (
            self.package.render(style) + sep + DOT.join(self.name_segments)
        )

    @property
    def qualified_name(self) -> str:
        """Java-style fully qualified name: ``a.b.Outer.Inner``."""
        return self.render(NameStyle.JAVA)

    @property
    def internal_class_name(self) -> str:
        """Class-metadata name: ``a/b/Outer.Inner``.

        Note that metadata readers may map some types onto different
        JVM types (``kotlin/Int`` -> ``java/lang/Integer``); no such
        mapping happens here.
        """
        return self.render(NameStyle.INTERNAL_CLASS)

    def __str__(self) -> str:
        return self.qualified_name


def make_package_path(dotted: str) -> PackagePath:
    """Return a :class:`PackagePath` for a Java-style ``dotted`` name."""
    return PackagePath(_split_dotted(dotted, kind="package"))


def make_qualified_identifier(
    package: PackagePath, dotted_name: str
) -> QualifiedIdentifier:
    """Return a :class:`QualifiedIdentifier` for ``dotted_name`` in ``package``.

    ``dotted_name`` may name a nested declaration (``"Outer.Inner"``).
    """
    return QualifiedIdentifier(
        package, _split_dotted(dotted_name, kind="name")
    )
