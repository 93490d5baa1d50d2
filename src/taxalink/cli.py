"""
Command-line interface.

Examples::

    taxalink comm "Helianthus annuus" --db itis
    taxalink classification "Gadus morhua" --db worms --full
    taxalink bold Apis
    taxalink downstream Animalia --downto phylum
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

import pandas as pd

from taxalink import __version__
from taxalink.config import get_settings
from taxalink.dispatch import bold_search, classification, col_downstream, sci2comm
from taxalink.exceptions import TaxalinkError
from taxalink.results import ResultMap


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="taxalink",
        description="Common names, classifications and child taxa from taxonomic web services",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log HTTP requests and every diagnostic",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Report names that could not be resolved",
    )
    parser.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Record failed lookups as missing instead of aborting",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    comm_parser = subparsers.add_parser("comm", help="Common names for scientific names")
    comm_parser.add_argument("names", nargs="+", help="Scientific names")
    comm_parser.add_argument(
        "--db", default="eol", choices=["eol", "itis", "ncbi", "worms"], help="Data source (default: eol)"
    )
    comm_parser.add_argument("--full", action="store_true", help="Print full tables")

    class_parser = subparsers.add_parser("classification", help="Lineage of scientific names")
    class_parser.add_argument("names", nargs="+", help="Scientific names")
    class_parser.add_argument(
        "--db", default="itis", choices=["itis", "ncbi", "worms", "col"], help="Data source (default: itis)"
    )
    class_parser.add_argument("--full", action="store_true", help="Print full tables")

    bold_parser = subparsers.add_parser("bold", help="Search BOLD taxonomy")
    bold_parser.add_argument("names", nargs="*", help="Taxon names")
    bold_parser.add_argument("--id", dest="ids", action="append", help="BOLD taxid (repeatable)")
    bold_parser.add_argument("--fuzzy", action="store_true", help="Fuzzy name matching")

    down_parser = subparsers.add_parser("downstream", help="Child taxa from the Catalogue of Life")
    down_parser.add_argument("names", nargs="+", help="Taxon names")
    down_parser.add_argument("--downto", required=True, help="Rank to collect, e.g. phylum")

    subparsers.add_parser("info", help="Show configuration")

    return parser


def configure_logging(args: argparse.Namespace) -> None:
    level = logging.DEBUG if args.debug else logging.INFO if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_value(value: Any) -> None:
    if value is None:
        print("  (no result)")
    elif isinstance(value, pd.DataFrame):
        print(value.to_string(index=False))
    else:
        for item in value:
            print(f"  {item}")


def print_results(results: ResultMap) -> None:
    for name, value in results.items():
        print(f"{name}:")
        _print_value(value)


def _common(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "verbose": args.verbose or None,
        "on_error": "continue" if args.continue_on_error else None,
    }


def cmd_comm(args: argparse.Namespace) -> int:
    """Handle the 'comm' command."""
    print_results(sci2comm(args.names, db=args.db, simplify=not args.full, **_common(args)))
    return 0


def cmd_classification(args: argparse.Namespace) -> int:
    """Handle the 'classification' command."""
    print_results(classification(args.names, db=args.db, simplify=not args.full, **_common(args)))
    return 0


def cmd_bold(args: argparse.Namespace) -> int:
    """Handle the 'bold' command."""
    frame = bold_search(args.names or None, id=args.ids, fuzzy=args.fuzzy, **_common(args))
    print(frame.to_string(index=False))
    return 0


def cmd_downstream(args: argparse.Namespace) -> int:
    """Handle the 'downstream' command."""
    print_results(col_downstream(args.names, args.downto, **_common(args)))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Version: {__version__}")
    print(f"EOL API key: {'set' if settings.eol_api_key else 'not set'}")
    print(f"NCBI API key: {'set' if settings.ncbi_api_key else 'not set'}")
    print(f"CoL dataset: {settings.col_dataset_key}")
    print(f"On error: {settings.on_error.value}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args)

    commands = {
        "comm": cmd_comm,
        "classification": cmd_classification,
        "bold": cmd_bold,
        "downstream": cmd_downstream,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    try:
        return handler(args)
    except TaxalinkError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
