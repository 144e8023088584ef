"""Command-line interface for printing Makefile target documentation."""

from __future__ import annotations

import argparse
import logging
import sys

from makedoc import documents, presenter
from makedoc.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level.

    The level is capped at ERROR so fatal messages always reach stderr.
    """
    numeric_level = min(logging.getLevelNamesMapping().get(level, logging.WARNING), logging.ERROR)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(numeric_level)


def positive_int(value: str) -> int:
    """Argument type for integers greater than zero."""
    try:
        number = int(value)
    except ValueError:
        msg = f"invalid int value: {value!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if number <= 0:
        msg = f"must be positive: {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return number


def get_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Options accept both the single-dash spelling (-target=build) and the
    double-dash one (--target build).
    """
    parser = argparse.ArgumentParser(
        prog="makedoc",
        description="Show the documentation of Makefile targets, taken from the '##' comments above them",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Makefiles to read, later files override targets from earlier ones",
    )
    parser.add_argument(
        "-target",
        "--target",
        default="",
        help="only show documentation for given target",
    )
    parser.add_argument(
        "-verbose",
        "--verbose",
        action="store_true",
        help="show verbose output",
    )
    parser.add_argument(
        "-pretty",
        "--pretty",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="make the output pretty (default from MAKEDOC_PRETTY)",
    )
    parser.add_argument(
        "--column-width",
        type=positive_int,
        default=None,
        help=f"width of the target column (default: {settings.column_width})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Returns:
    -------
        Exit code (0 for success, 1 for failure)

    """
    args = get_parser().parse_args(argv)

    configure_logging("DEBUG" if args.debug else settings.log_level)

    if not args.files:
        logger.error("no makefiles provided for parsing")
        return 1

    try:
        docs = documents.load(args.files)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"failed to load makefiles: {e}")
        return 1

    if args.target:
        if args.target not in docs:
            logger.error(f"target: {args.target}, doesn't exist")
            return 1
        targets = [args.target]
    else:
        targets = sorted(docs)

    colorize = settings.pretty if args.pretty is None else args.pretty
    column_width = settings.column_width if args.column_width is None else args.column_width

    for target in targets:
        try:
            presenter.pretty(
                sys.stdout,
                docs[target],
                verbose=args.verbose,
                colorize=colorize,
                column_width=column_width,
            )
        except OSError as e:
            logger.error(f"failed to format help: {e}")
            return 1

    try:
        sys.stdout.flush()
    except OSError as e:
        logger.error(f"failed to flush help: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
