"""File-opening helpers shared by split and merge."""

from pathlib import Path
from typing import BinaryIO

from file_splitter.errors import TransferError


def ensure_directory(directory: Path) -> None:
    """Create ``directory`` and its parents if it does not exist yet."""
    if directory.is_dir():
        return
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise TransferError(
            f'Output directory "{directory}" not found and cannot be created', exc
        ) from exc


def create_exclusive(path: Path) -> BinaryIO:
    """Open a new file for writing; fails if ``path`` already exists."""
    try:
        return open(path, "xb")  # noqa: SIM115
    except OSError as exc:
        raise TransferError(f'Error creating and opening "{path}" for writing', exc) from exc
