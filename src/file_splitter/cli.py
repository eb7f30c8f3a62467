"""Command-line interface for splitting and merging files."""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import NoReturn

from file_splitter.errors import TransferError
from file_splitter.size import parse_size
from file_splitter.transfer import merge_files, split_file

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "."


class UsageParser(argparse.ArgumentParser):
    """Argument parser that answers bad invocations with the usage line."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stdout)
        self.exit(0)


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _add_log_level(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )


def create_split_parser() -> argparse.ArgumentParser:
    """Create the argument parser for file-split."""
    parser = UsageParser(
        prog="file-split",
        description="Split a file into numbered parts of at most PART_SIZE bytes.",
    )
    parser.add_argument("file", metavar="FILE", help="Path to the file to split")
    parser.add_argument(
        "part_size",
        metavar="PART_SIZE",
        help="Maximum part size, e.g. 4096, 700K, 144MB, 4GB (binary units)",
    )
    parser.add_argument(
        "output_dir",
        metavar="OUTPUT_DIR",
        nargs="?",
        default=DEFAULT_OUTPUT_DIR,
        help="Directory for the part files (default: current directory)",
    )
    _add_log_level(parser)
    return parser


def create_merge_parser() -> argparse.ArgumentParser:
    """Create the argument parser for file-merge."""
    parser = UsageParser(
        prog="file-merge",
        description="Concatenate FILE_PREFIX.1, FILE_PREFIX.2, ... into one file.",
    )
    parser.add_argument(
        "prefix",
        metavar="FILE_PREFIX",
        help="Common prefix of the part files (may include a directory)",
    )
    parser.add_argument(
        "output_file",
        metavar="OUTPUT_FILE",
        nargs="?",
        default=None,
        help="File to create (default: FILE_PREFIX); must not exist",
    )
    _add_log_level(parser)
    return parser


def _run(operation: Callable[[], object]) -> int:
    """Run a transfer and turn a TransferError into a message and exit code."""
    try:
        operation()
    except TransferError as exc:
        logger.error("%s", exc)
        return exc.errno or 1
    return 0


def split_main(argv: Sequence[str] | None = None) -> int:
    """Entry point for file-split."""
    parser = create_split_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(logging, args.log_level))

    part_size = parse_size(args.part_size)
    if part_size is None:
        print(f'Cannot parse "{args.part_size}" as a size')
        return 0
    if part_size == 0:
        logger.error("PART_SIZE must be at least 1 byte")
        return 2

    return _run(lambda: split_file(args.file, args.output_dir, part_size))


def merge_main(argv: Sequence[str] | None = None) -> int:
    """Entry point for file-merge."""
    parser = create_merge_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(logging, args.log_level))

    return _run(lambda: merge_files(args.prefix, args.output_file))

