"""Command-line interface for recursive-csv."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from . import __version__
from .config import Settings, load_config, settings_from_config
from .errors import RecursiveCSVError
from .utils import configure_logging, resolve_reference, write_stats
from .writer import RecursiveCSVWriter

logger = logging.getLogger(__name__)

# argparse destination -> Settings field
_OVERRIDES = {
    "use_all_fields": "use_all_fields",
    "max_depth": "max_depth",
    "allow_arrays": "allow_arrays",
    "array_delimiter": "array_element_delimiter",
    "column_delimiter": "column_delimiter",
    "ignore_mismatched": "ignore_mismatched_type",
    "path_separator": "path_separator",
}


def _settings_from_args(args: argparse.Namespace) -> Settings:
    settings = settings_from_config(load_config(args.config, args.profile))
    changes = {
        field: getattr(args, dest)
        for dest, field in _OVERRIDES.items()
        if getattr(args, dest) is not None
    }
    return settings.replace(**changes) if changes else settings


def _load_records(reference: str) -> list:
    source = resolve_reference(reference)
    if callable(source):
        source = source()
    return list(source)


def handle_convert(args: argparse.Namespace) -> None:
    writer = RecursiveCSVWriter(_settings_from_args(args))
    records = _load_records(args.source)
    if args.output:
        writer.write_to_file(records, args.output)
    else:
        writer.write_to_file(records, sys.stdout)
    if args.stats and writer.last_stats is not None:
        write_stats(args.stats, writer.last_stats)


def handle_columns(args: argparse.Namespace) -> None:
    record_type = resolve_reference(args.record_type)
    if not isinstance(record_type, type):
        raise ValueError(f"{args.record_type} is not a class")
    writer = RecursiveCSVWriter(_settings_from_args(args))
    for column in writer.columns(record_type):
        print(column)


def _add_settings_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--profile", help="Named profile from the configuration file")
    parser.add_argument("--max-depth", type=int, help="Levels of nested records to expand into columns")
    parser.add_argument(
        "--allow-arrays",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write sequence fields as one joined column",
    )
    parser.add_argument(
        "--use-all-fields",
        dest="use_all_fields",
        action="store_const",
        const=True,
        default=None,
        help="Include private fields declared on each class",
    )
    parser.add_argument(
        "--public-only",
        dest="use_all_fields",
        action="store_const",
        const=False,
        help="Only include public fields, inherited ones included",
    )
    parser.add_argument(
        "--ignore-mismatched",
        dest="ignore_mismatched",
        action="store_const",
        const=True,
        default=None,
        help="Skip records whose class differs from the first record",
    )
    parser.add_argument(
        "--strict",
        dest="ignore_mismatched",
        action="store_const",
        const=False,
        help="Fail when a record's class differs from the first record",
    )
    parser.add_argument("--column-delimiter", help="Column delimiter")
    parser.add_argument("--array-delimiter", help="Delimiter between joined array elements")
    parser.add_argument("--path-separator", help="Separator between nested field names")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recursive-csv",
        description="Flatten collections of typed Python records into CSV text.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", help="Logging level (defaults to $RECURSIVE_CSV_LOG_LEVEL or WARNING)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_p = subparsers.add_parser(
        "convert",
        help="Convert records to CSV",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    convert_p.add_argument(
        "source",
        help="module:attribute naming an iterable of records or a callable returning one",
    )
    convert_p.add_argument("--output", type=Path, help="Where to write the CSV (defaults to stdout)")
    convert_p.add_argument("--stats", type=Path, help="Optional JSON file for run statistics")
    _add_settings_arguments(convert_p)
    convert_p.set_defaults(func=handle_convert)

    columns_p = subparsers.add_parser(
        "columns",
        help="List the columns produced for a record class",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    columns_p.add_argument("record_type", help="module:Class naming the record class")
    _add_settings_arguments(columns_p)
    columns_p.set_defaults(func=handle_columns)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        args.func(args)
    except (RecursiveCSVError, ImportError, ValueError, OSError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"recursive-csv: error: {exc}", file=sys.stderr)
        return 1
    return 0


__all__ = ["main", "build_parser"]
