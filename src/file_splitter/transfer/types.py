"""Shared constants and metadata structures for chunked transfers."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

ByteCount: TypeAlias = int
PartIndex: TypeAlias = int

# Scratch buffer size for the copy loop.
BUFFER_SIZE = 4096

# Part indices are counted with an unsigned 32-bit counter.
MAX_PART_INDEX = 2**32 - 1

# Largest size a size specification may describe (unsigned 64-bit).
MAX_BYTE_COUNT = 2**64 - 1


@dataclass
class SplitStats:
    """Statistics from a split_file operation."""

    part_paths: list[Path] = field(default_factory=list)
    bytes_copied: ByteCount = 0

    @property
    def parts_written(self) -> int:
        return len(self.part_paths)
