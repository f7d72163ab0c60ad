"""CLI entry point: ``lintnames render`` and ``lintnames catalog``."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from lintnames import __version__
from lintnames.catalog import (
    Catalog,
    build_catalog,
    load_catalog,
    merge_catalogs,
)
from lintnames.config import Settings
from lintnames.constants import NameStyle
from lintnames.logging_config import setup_logging
from lintnames.names import make_package_path, make_qualified_identifier


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"lintnames {__version__}")
        return

    try:
        settings = Settings()
        setup_logging("DEBUG" if args.verbose else settings.log_level)

        if args.command == "render":
            _run_render(args)
        elif args.command == "catalog":
            _run_catalog(args, settings)
        else:
            parser.print_help()
    except (ValueError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lintnames",
        description=(
            "Render fully-qualified names of well-known "
            "library symbols."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command")

    render = sub.add_parser(
        "render",
        help="Render one identifier",
    )
    render.add_argument(
        "package",
        help="Java-style package, e.g. androidx.compose.runtime",
    )
    render.add_argument(
        "name",
        help="Declaration name, dotted when nested (Outer.Inner)",
    )
    render.add_argument(
        "--style",
        "-s",
        choices=[*(s.value for s in NameStyle), "all"],
        default=NameStyle.JAVA.value,
        help="Output encoding (default: java)",
    )

    catalog = sub.add_parser(
        "catalog",
        help="List the catalog of well-known names",
    )
    catalog.add_argument(
        "--file",
        "-f",
        action="append",
        default=[],
        help=(
            "Additional catalog YAML file "
            "(repeatable; merged after configured files)"
        ),
    )
    catalog.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    return parser


def _run_render(args: argparse.Namespace) -> None:
    """Execute the render command."""
    identifier = make_qualified_identifier(
        make_package_path(args.package), args.name
    )
    if args.style == "all":
        print(
            json.dumps(
                {
                    "qualified_name": identifier.qualified_name,
                    "internal_class_name": identifier.internal_class_name,
                    "short_name": identifier.short_name,
                },
                indent=2,
            )
        )
    else:
        print(identifier.render(NameStyle(args.style)))


def _run_catalog(args: argparse.Namespace, settings: Settings) -> None:
    """Execute the catalog command."""
    catalog = merge_catalogs(
        build_catalog(settings),
        *(load_catalog(Path(p)) for p in args.file),
    )
    print(_format_catalog(catalog, args.format))


def _format_catalog(catalog: Catalog, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(
            [
                {
                    "qualified_name": n.qualified_name,
                    "internal_class_name": n.internal_class_name,
                    "short_name": n.short_name,
                }
                for n in catalog
            ],
            indent=2,
        )
    return "\n".join(
        f"{n.qualified_name}\t{n.internal_class_name}" for n in catalog
    )


if __name__ == "__main__":
    main()
