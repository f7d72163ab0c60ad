"""Fully-qualified identifiers for well-known library symbols."""

from lintnames.constants import NameStyle
from lintnames.errors import InvalidIdentifierFormat
from lintnames.names import (
    PackagePath,
    QualifiedIdentifier,
    make_package_path,
    make_qualified_identifier,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidIdentifierFormat",
    "NameStyle",
    "PackagePath",
    "QualifiedIdentifier",
    "make_package_path",
    "make_qualified_identifier",
]
