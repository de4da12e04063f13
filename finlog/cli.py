"""Command-line interface for the financial application log generator."""

import logging
import sys
from argparse import ArgumentParser

from finlog.config import DEFAULT_DIRECTORY, load_config
from finlog.errors import ConfigError, GeneratorError
from finlog.models import LogFormat
from finlog.progress import ConsoleProgress
from finlog.writer import PacedWriter

logger = logging.getLogger("finlog")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="finlog-generator",
        description="Append synthetic financial application events to a log file.",
    )
    parser.add_argument(
        "--count",
        type=int,
        help="Number of entries to generate, 1-10000 (default: 10000)",
    )
    parser.add_argument(
        "--time-range",
        type=int,
        help="Seconds to spread entries across, 0-300; 0 disables pacing (default: 30)",
    )
    parser.add_argument(
        "--directory",
        help=f"Output directory (default: {DEFAULT_DIRECTORY})",
    )
    parser.add_argument(
        "--type",
        dest="log_type",
        choices=LogFormat.choices(),
        help="Output line format (default: SpaceDelimeter)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        default=None,
        help="Announce that an existing log file will be overwritten",
    )
    parser.add_argument(
        "--show-progress",
        action="store_true",
        default=None,
        help="Report progress once per second while pacing",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the event-id random source for reproducible output",
    )
    parser.add_argument(
        "--config",
        help="YAML config file (overridden by environment and flags)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def setup_logging(verbose: bool = False) -> None:
    # Internal logging to stderr, separate from the generated log file
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [FINLOG] %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def run(args) -> int:
    try:
        config = load_config(
            overrides={
                "count": args.count,
                "time_range": args.time_range,
                "directory": args.directory,
                "log_type": args.log_type,
                "force": args.force,
                "show_progress": args.show_progress,
                "seed": args.seed,
            },
            config_path=args.config,
        )
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return EXIT_USAGE

    print(
        f"Generating {config.count} {config.log_type.value} entries "
        f"over {config.time_range}s into {config.output_path}",
        flush=True,
    )

    writer = PacedWriter(config, reporter=ConsoleProgress())
    try:
        result = writer.run()
    except GeneratorError as e:
        logger.error("%s", e)
        return EXIT_FAILED

    print(f"Added {result.entries_added} entries to {result.output_path}", flush=True)
    return EXIT_OK


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    try:
        return run(args)
    except KeyboardInterrupt:
        logger.warning("Interrupted, no entries were written")
        return EXIT_INTERRUPTED
