"""Entry parsing: raw text lines -> glyph entries -> digit strings.

Input files hold one entry per 4 lines: three glyph rows of 27 characters
followed by a blank separator line. Each row is cut into nine 3-character
slices; slice ``i`` of the three rows, concatenated, is the glyph pattern
for digit ``i``.

The shape of the whole input is checked before any entry is parsed, so a
malformed file fails fast instead of producing partial output.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Union

from .glyphs import digit_for
from .types import (
    DIGITS_PER_ENTRY,
    GLYPH_HEIGHT,
    GLYPH_SIZE,
    GLYPH_WIDTH,
    LINES_PER_ENTRY,
    ROW_WIDTH,
    DigitString,
    Entry,
)

logger = logging.getLogger(__name__)


def parse_entry(entry: Sequence[str]) -> DigitString:
    """Convert 9 glyph patterns into a 9-character digit string.

    Unrecognised glyphs become '?'.

    Args:
        entry: Exactly 9 glyph patterns of 9 characters each

    Returns:
        9-character string over '0'-'9' and '?'

    Raises:
        ValueError: If the entry does not hold 9 patterns of 9 characters

    Example:
        >>> parse_entry([" _ | ||_|"] * 9)
        '000000000'
    """
    if len(entry) != DIGITS_PER_ENTRY:
        raise ValueError(
            f"Expected {DIGITS_PER_ENTRY} glyph patterns per entry, got {len(entry)}"
        )

    for position, pattern in enumerate(entry):
        if not isinstance(pattern, str) or len(pattern) != GLYPH_SIZE:
            raise ValueError(
                f"Glyph pattern at position {position} must be a "
                f"{GLYPH_SIZE}-character string, got {pattern!r}"
            )

    return "".join(digit_for(pattern) for pattern in entry)


def split_entry(rows: Sequence[str]) -> Entry:
    """Slice three glyph rows into an entry of 9 patterns.

    Only the first 27 columns of a row are read. Shorter rows are
    right-padded with spaces, since editors commonly strip or add trailing
    blanks.

    Args:
        rows: The three glyph rows of one entry (separator line excluded)

    Returns:
        Tuple of 9 glyph patterns.

    Raises:
        ValueError: If there are not exactly 3 rows
    """
    if len(rows) != GLYPH_HEIGHT:
        raise ValueError(f"Expected {GLYPH_HEIGHT} glyph rows, got {len(rows)}")

    padded = [row[:ROW_WIDTH].ljust(ROW_WIDTH) for row in rows]

    return tuple(
        "".join(row[i * GLYPH_WIDTH : (i + 1) * GLYPH_WIDTH] for row in padded)
        for i in range(DIGITS_PER_ENTRY)
    )


def group_lines(lines: Sequence[str]) -> List[Entry]:
    """Group raw input lines into entries.

    Args:
        lines: All input lines, newline characters already stripped

    Returns:
        One entry per 4-line block, in input order.

    Raises:
        ValueError: If the line count is not a multiple of 4
    """
    if len(lines) % LINES_PER_ENTRY != 0:
        raise ValueError(
            f"Input must contain a multiple of {LINES_PER_ENTRY} lines "
            f"(3 glyph rows + 1 blank per entry), got {len(lines)}"
        )

    entries = [
        split_entry(lines[start : start + GLYPH_HEIGHT])
        for start in range(0, len(lines), LINES_PER_ENTRY)
    ]

    logger.debug(f"Grouped {len(lines)} lines into {len(entries)} entries")
    return entries


def read_entries(path: Union[str, Path], encoding: str = "utf-8") -> List[Entry]:
    """Read an input file and return its entries.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file contents are malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(path, "r", encoding=encoding) as f:
        lines = f.read().splitlines()

    logger.debug(f"Read {len(lines)} lines from {path}")
    return group_lines(lines)


def parse_lines(lines: Sequence[str]) -> List[DigitString]:
    """Parse raw input lines into digit strings, one per entry."""
    return [parse_entry(entry) for entry in group_lines(lines)]


def parse_file(path: Union[str, Path], encoding: str = "utf-8") -> List[DigitString]:
    """Parse an input file into digit strings, one per entry."""
    return [parse_entry(entry) for entry in read_entries(path, encoding)]
