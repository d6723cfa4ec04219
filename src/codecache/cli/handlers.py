"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from codecache.config import CodeCacheConfig, apply_overrides, load_config
from codecache.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from codecache.io import read_cache_file, write_cache_file, write_json_atomic
from codecache.processor import rehash, transplant_hashes, validate
from codecache.reporting import StdoutReporter

logger = logging.getLogger(__name__)


def resolve_config(args: argparse.Namespace) -> CodeCacheConfig:
    """Load the config file and apply command-line overrides."""
    config = load_config(Path.cwd(), args.config)
    return apply_overrides(
        config,
        pointer_width=args.pointer_width,
        byte_order=args.byte_order,
        color=False if getattr(args, "no_color", False) else None,
    )


def _reporter(args: argparse.Namespace, config: CodeCacheConfig, *, use_color: bool) -> StdoutReporter:
    return StdoutReporter(color=config.color and use_color, verbose=args.verbose)


def handle_validate(args: argparse.Namespace, *, use_color: bool) -> int:
    """Print header fields and the Match/Mismatch verdict."""
    config = resolve_config(args)
    data = read_cache_file(args.path)
    report = validate(data, config.layout())
    payload = report.to_dict(path=str(args.path))

    if args.output is not None:
        write_json_atomic(
            path=args.output,
            payload=payload,
            temp_prefix=REPORT_TEMP_PREFIX,
            temp_suffix=REPORT_TEMP_SUFFIX,
        )
        logger.info("Report written to %s", args.output)

    if args.json:
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        print(_reporter(args, config, use_color=use_color).render_validation(report))

    if args.fail_on_mismatch and not report.matches:
        return 1
    return 0


def handle_rehash(args: argparse.Namespace) -> int:
    """Recompute the checksum and write the file back."""
    config = resolve_config(args)
    data = read_cache_file(args.path)
    result = rehash(data, config.layout())
    destination = args.output if args.output is not None else args.path
    write_cache_file(destination, result.data)
    if not result.changed:
        logger.debug("Checksum already valid, rewrote %s unchanged", destination)
    print(_reporter(args, config, use_color=False).render_rehash(result))
    return 0


def handle_transplant(args: argparse.Namespace) -> int:
    """Copy build hashes from a donor cache, optionally refreshing the checksum."""
    config = resolve_config(args)
    layout = config.layout()
    data = read_cache_file(args.path)
    donor = read_cache_file(args.donor)
    result = transplant_hashes(data, donor, layout)
    reporter = _reporter(args, config, use_color=False)
    output = reporter.render_transplant(result)
    updated = result.data
    if args.rehash:
        rehashed = rehash(updated, layout)
        updated = rehashed.data
        output = "\n".join((output, reporter.render_rehash(rehashed)))
    destination = args.output if args.output is not None else args.path
    write_cache_file(destination, updated)
    print(output)
    return 0
