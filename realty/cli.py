"""Command-line entry point: generate listings and write them to a sink."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from realty.config import RealtyConfig
from realty.exceptions import ConfigurationError, RealtyError
from realty.generators import ListingGenerator
from realty.logging import get_logger, setup_logging_from_config
from realty.sinks import ConsoleSink, JsonFileSink
from realty.store import PropertyRegistry

logger = get_logger(__name__)


def build_parser(config: RealtyConfig) -> argparse.ArgumentParser:
    """Build the argument parser, taking defaults from ``config``."""
    parser = argparse.ArgumentParser(
        prog="realty-generate",
        description="Generate synthetic property, apartment and condo listings.",
    )
    parser.add_argument(
        "-n", "--count",
        type=int,
        default=config.generator.count,
        help=f"Number of listings to generate (default: {config.generator.count})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for reproducible output",
    )
    parser.add_argument(
        "--sink",
        choices=["console", "json"],
        default="console",
        help="Where to write listings (default: console)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.json_output_dir,
        help="Directory for the json sink",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.output.pretty_json,
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "--addresses",
        action="store_true",
        help="Print mailing addresses instead of records",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    return parser


def run(args: argparse.Namespace, config: RealtyConfig) -> PropertyRegistry:
    """Generate listings, register them and write them out."""
    if args.count < 0:
        raise ConfigurationError(f"--count must not be negative, got {args.count}")

    generator = ListingGenerator(
        kind_weights=config.generator.kind_weights,
        seed=args.seed,
        locale=config.generator.locale,
    )
    registry = PropertyRegistry()
    registry.add_all(list(generator.generate_batch(args.count)))
    logger.info("Generated %d listings: %s", len(registry), registry.count_by_kind())

    if args.addresses:
        for prop in registry:
            print(prop.mailing_address())
            print()
        return registry

    if args.sink == "json":
        sink: ConsoleSink | JsonFileSink = JsonFileSink(args.output_dir, pretty=args.pretty)
    else:
        sink = ConsoleSink(pretty=args.pretty)

    batches: dict[str, list] = {}
    for prop in registry:
        batches.setdefault(prop.kind, []).append(prop)
    try:
        for kind, records in batches.items():
            sink.write_batch(kind, records)
    finally:
        sink.close()
    return registry


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return a process exit code."""
    try:
        config = RealtyConfig.from_env()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    args = build_parser(config).parse_args(argv)
    setup_logging_from_config(config, level=args.log_level)

    try:
        run(args, config)
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return 2
    except RealtyError as exc:
        logger.error("Generation failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
