"""Part file naming shared by the splitter and the merger."""

from pathlib import Path

from file_splitter.transfer.types import MAX_PART_INDEX, PartIndex


def part_name(base: str, index: PartIndex) -> str:
    """Return ``<base>.<index>`` with an unpadded decimal index."""
    if not 1 <= index <= MAX_PART_INDEX:
        raise ValueError(f"part index must be in 1..{MAX_PART_INDEX}, got {index}")
    return f"{base}.{index:d}"


def part_path(base: str | Path, index: PartIndex) -> Path:
    """Path form of part_name; ``base`` may include a directory."""
    return Path(part_name(str(base), index))
