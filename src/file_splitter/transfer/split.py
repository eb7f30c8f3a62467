"""Split a file into a numbered sequence of fixed-size parts."""

import contextlib
import errno
import logging
import time
from pathlib import Path

from file_splitter.errors import TransferError
from file_splitter.transfer.copy import copy_bytes
from file_splitter.transfer.files import create_exclusive, ensure_directory
from file_splitter.transfer.naming import part_path
from file_splitter.transfer.types import MAX_PART_INDEX, ByteCount, SplitStats

logger = logging.getLogger(__name__)


def split_file(
    source_path: str | Path,
    output_dir: str | Path,
    part_size: ByteCount,
) -> SplitStats:
    """
    Split ``source_path`` into ``<output_dir>/<name>.1``, ``.2``, ...

    Every part except the last holds exactly ``part_size`` bytes. Parts are
    created exclusively, so an existing part aborts the split. A trailing
    empty part (empty source, or a length that is a multiple of
    ``part_size``) is removed before returning.
    """
    if part_size < 1:
        raise ValueError(f"part_size must be at least 1, got {part_size}")

    start = time.perf_counter()
    source = Path(source_path)
    out_dir = Path(output_dir)
    base = out_dir / source.name
    stats = SplitStats()

    logger.info("Splitting %s into %d-byte parts in %s", source, part_size, out_dir)

    ensure_directory(out_dir)

    try:
        src = open(source, "rb")  # noqa: SIM115
    except OSError as exc:
        raise TransferError(f'Error opening "{source}" for reading', exc) from exc

    with src:
        index = 1
        while True:
            path = part_path(base, index)
            with create_exclusive(path) as dst:
                written = copy_bytes(
                    src, dst, part_size, src_name=str(source), dst_name=str(path)
                )

            stats.bytes_copied += written

            if written == 0:
                # Nothing left for this part; drop the empty file.
                with contextlib.suppress(OSError):
                    path.unlink()
                logger.debug("Removed empty trailing part %s", path)
                break

            stats.part_paths.append(path)
            logger.debug("Wrote part %d: %s (%d bytes)", index, path, written)

            if written < part_size:
                break
            if index == MAX_PART_INDEX:
                # A full last part is fine as long as nothing follows it.
                if not src.peek(1):
                    break
                cause = OSError(errno.EFBIG, f"more than {MAX_PART_INDEX} parts required")
                raise TransferError(f'Cannot split "{source}"', cause)
            index += 1

    logger.info(
        "Split done: %d parts, %d bytes in %.2fs",
        stats.parts_written,
        stats.bytes_copied,
        time.perf_counter() - start,
    )
    return stats
