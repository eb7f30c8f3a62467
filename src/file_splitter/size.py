"""Parsing of human-readable size specifications such as ``144MB``."""

import re

from file_splitter.transfer.types import MAX_BYTE_COUNT, ByteCount

_SIZE_RE = re.compile(r"([0-9]+)([kmg]?b?)", re.IGNORECASE)

_MULTIPLIERS = {
    "": 1,
    "b": 1,
    "k": 1024,
    "kb": 1024,
    "m": 1024**2,
    "mb": 1024**2,
    "g": 1024**3,
    "gb": 1024**3,
}


def parse_size(text: str) -> ByteCount | None:
    """
    Convert a size specification into a byte count.

    Accepts a decimal number with an optional case-insensitive unit
    (B, K/KB, M/MB, G/GB; binary multiples). Returns None for anything
    else, including signs, stray characters, and values that overflow
    an unsigned 64-bit count.
    """
    match = _SIZE_RE.fullmatch(text)
    if match is None:
        return None

    digits, unit = match.groups()
    # Longer than any 64-bit value; also keeps int() off huge inputs.
    if len(digits.lstrip("0")) > len(str(MAX_BYTE_COUNT)):
        return None

    size = int(digits) * _MULTIPLIERS[unit.lower()]
    if size > MAX_BYTE_COUNT:
        return None
    return size
