"""CLI entrypoint for codecache."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from codecache import __version__
from codecache.cli.handlers import handle_rehash, handle_transplant, handle_validate
from codecache.constants.branding import CLI_DESCRIPTION
from codecache.constants.layout import VALID_BYTE_ORDERS, VALID_POINTER_WIDTHS
from codecache.exceptions import CodeCacheError, ConfigError


def _add_layout_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", type=Path, help="Code-cache file")
    parser.add_argument(
        "-w",
        "--pointer-width",
        type=int,
        choices=sorted(VALID_POINTER_WIDTHS),
        default=None,
        help="Target pointer width of the engine that wrote the cache (default: 64, or from config)",
    )
    parser.add_argument(
        "-e",
        "--byte-order",
        choices=sorted(VALID_BYTE_ORDERS),
        default=None,
        help="Byte order of header fields (default: little, or from config)",
    )
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show diagnostics")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="codecache",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Compare the stored checksum with the payload")
    _add_layout_arguments(validate)
    validate.add_argument("--json", action="store_true", help="Print the report as JSON")
    validate.add_argument("-o", "--output", type=Path, default=None, help="Also write the JSON report to this path")
    validate.add_argument(
        "--fail-on-mismatch",
        action="store_true",
        help="Exit with status 1 when the checksum does not match",
    )
    validate.add_argument("--no-color", action="store_true", help="Disable colored output")

    rehash = subparsers.add_parser("rehash", help="Recompute and write the checksum")
    _add_layout_arguments(rehash)
    rehash.add_argument("-o", "--output", type=Path, default=None, help="Write to this path instead of in place")

    transplant = subparsers.add_parser(
        "transplant",
        help="Copy version, source and flag hashes from a donor cache",
    )
    _add_layout_arguments(transplant)
    transplant.add_argument("-d", "--donor", type=Path, required=True, help="Cache produced by the target engine")
    transplant.add_argument("--rehash", action="store_true", help="Also recompute the checksum")
    transplant.add_argument("-o", "--output", type=Path, default=None, help="Write to this path instead of in place")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        if args.command == "validate":
            return handle_validate(args, use_color=sys.stdout.isatty())
        if args.command == "rehash":
            return handle_rehash(args)
        if args.command == "transplant":
            return handle_transplant(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except CodeCacheError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
