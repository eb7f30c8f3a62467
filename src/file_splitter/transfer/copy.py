"""Fixed-buffer byte pump used by both split and merge."""

import errno
from typing import BinaryIO

from file_splitter.errors import TransferError
from file_splitter.transfer.types import BUFFER_SIZE, ByteCount


def copy_bytes(
    src: BinaryIO,
    dst: BinaryIO,
    limit: ByteCount | None = None,
    *,
    src_name: str = "<source>",
    dst_name: str = "<destination>",
) -> ByteCount:
    """
    Copy up to ``limit`` bytes from ``src`` to ``dst``.

    With ``limit=None`` the copy runs until ``src`` is exhausted. A read that
    returns no data ends the copy early. Returns the number of bytes copied.
    """
    buffer = bytearray(BUFFER_SIZE)
    view = memoryview(buffer)
    copied = 0

    while limit is None or copied < limit:
        to_read = BUFFER_SIZE if limit is None else min(BUFFER_SIZE, limit - copied)

        try:
            n = src.readinto(view[:to_read])
        except OSError as exc:
            raise TransferError(f'Error reading from "{src_name}"', exc) from exc

        if not n:
            break

        try:
            written = dst.write(view[:n])
        except OSError as exc:
            raise TransferError(f'Error writing to "{dst_name}"', exc) from exc

        if written != n:
            cause = OSError(errno.EIO, f"short write ({written} of {n} bytes)")
            raise TransferError(f'Error writing to "{dst_name}"', cause)

        copied += n

    return copied
