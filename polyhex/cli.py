"""CLI for enumerating free polyhexes.

Usage::

    python -m polyhex 8

    # Write catalogs elsewhere and audit every generation
    python -m polyhex 6 --output-dir catalogs --verify

Writes ``2.json`` .. ``<max_size>.json`` to the output directory
(``POLYHEX_OUTPUT_DIR``, default: current directory).
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from polyhex.catalog.exporter import CatalogExporter
from polyhex.config import settings
from polyhex.engine.growth import enumerate_polyhexes

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyhex",
        description="Enumerate free polyhexes and classify their symmetry",
    )
    parser.add_argument("max_size", type=positive_int, help="Largest polyhex size to enumerate")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for <n>.json catalogs (default: POLYHEX_OUTPUT_DIR or .)",
    )
    parser.add_argument(
        "--verify",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Audit connectivity and canonical form of every generation",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=(args.log_level or settings.log_level).upper())

    output_dir = args.output_dir if args.output_dir is not None else settings.output_dir
    exporter = CatalogExporter(output_dir)

    logger.info(f"Enumerating free polyhexes up to size {args.max_size} into {output_dir}")
    result = enumerate_polyhexes(args.max_size, exporter=exporter, verify=args.verify)

    print(result.summary())


if __name__ == "__main__":
    main()
