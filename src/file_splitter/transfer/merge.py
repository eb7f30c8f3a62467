"""Merge a numbered sequence of parts back into one file."""

import errno
import logging
import os
import time
from pathlib import Path

from file_splitter.errors import TransferError
from file_splitter.transfer.copy import copy_bytes
from file_splitter.transfer.files import create_exclusive, ensure_directory
from file_splitter.transfer.naming import part_path

logger = logging.getLogger(__name__)


def merge_files(input_prefix: str | Path, output_path: str | Path | None = None) -> int:
    """
    Concatenate ``<input_prefix>.1``, ``.2``, ... into ``output_path``.

    The walk stops at the first index whose part does not exist, so a gap
    truncates the result silently. ``output_path`` defaults to
    ``input_prefix`` and must not exist yet. Returns the number of parts
    merged.
    """
    start = time.perf_counter()
    prefix = str(input_prefix)
    output = Path(output_path) if output_path is not None else Path(prefix)

    logger.info("Merging parts %s.* into %s", prefix, output)

    ensure_directory(output.parent)

    merged = 0
    total_bytes = 0
    with create_exclusive(output) as dst:
        index = 1
        while True:
            path = part_path(prefix, index)
            try:
                src = open(path, "rb")  # noqa: SIM115
            except FileNotFoundError:
                break
            except OSError as exc:
                raise TransferError(f'Error opening input file "{path}"', exc) from exc

            with src:
                if os.path.sameopenfile(src.fileno(), dst.fileno()):
                    cause = OSError(errno.EINVAL, "part is the output file")
                    raise TransferError(f'Cannot merge "{path}" into itself', cause)
                copied = copy_bytes(src, dst, src_name=str(path), dst_name=str(output))

            logger.debug("Appended part %d: %s (%d bytes)", index, path, copied)
            total_bytes += copied
            merged = index
            index += 1

    if merged == 0:
        logger.info("No parts found for %s; created empty %s", prefix, output)

    logger.info(
        "Merge done: %d parts, %d bytes in %.2fs",
        merged,
        total_bytes,
        time.perf_counter() - start,
    )
    return merged
