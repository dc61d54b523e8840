"""Glyph table and single-segment neighbour search.

Each digit is drawn as a 3x3 block of spaces, underscores and pipes. The
block is stored row-concatenated as a 9-character pattern:

     _
    | |   ->   " _ | ||_|"   ->   "0"
    |_|

The table is fixed: exactly ten patterns, one per digit, built once at
import time and read-only afterwards.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import FrozenSet, List, Mapping

from .types import (
    DIGITS_PER_ENTRY,
    GLYPH_HEIGHT,
    GLYPH_SIZE,
    GLYPH_WIDTH,
    UNKNOWN,
    DigitString,
    GlyphPattern,
)

DIGIT_PATTERNS: Mapping[GlyphPattern, str] = MappingProxyType(
    {
        " _ | ||_|": "0",
        "     |  |": "1",
        " _  _||_ ": "2",
        " _  _| _|": "3",
        "   |_|  |": "4",
        " _ |_  _|": "5",
        " _ |_ |_|": "6",
        " _   |  |": "7",
        " _ |_||_|": "8",
        " _ |_| _|": "9",
    }
)

PATTERNS_BY_DIGIT: Mapping[str, GlyphPattern] = MappingProxyType(
    {digit: pattern for pattern, digit in DIGIT_PATTERNS.items()}
)


def digit_for(pattern: GlyphPattern) -> str:
    """Look up the digit drawn by a glyph pattern.

    Args:
        pattern: 9-character glyph pattern

    Returns:
        Digit character '0'-'9', or '?' when the pattern is not one of the
        ten known glyphs (blank, corrupted or wrong length).

    Example:
        >>> digit_for(" _ | ||_|")
        '0'
        >>> digit_for("         ")
        '?'
    """
    if not isinstance(pattern, str):
        return UNKNOWN
    return DIGIT_PATTERNS.get(pattern, UNKNOWN)


def pattern_for(digit: str) -> GlyphPattern:
    """Look up the glyph pattern for a digit.

    Raises:
        ValueError: If ``digit`` is not a single character '0'-'9'
    """
    try:
        return PATTERNS_BY_DIGIT[digit]
    except KeyError as e:
        raise ValueError(f"No glyph for character: {digit!r}") from e


def render(number: DigitString) -> List[str]:
    """Render a 9-digit string as its three 27-character glyph rows.

    Args:
        number: String of exactly 9 digits

    Returns:
        List of 3 rows, top to bottom.

    Raises:
        ValueError: If ``number`` is not 9 characters or contains non-digits

    Example:
        >>> render("123456789")[0]
        '    _  _     _  _  _  _  _ '
    """
    if len(number) != DIGITS_PER_ENTRY:
        raise ValueError(
            f"Expected {DIGITS_PER_ENTRY} characters, got {len(number)}"
        )

    patterns = [pattern_for(digit) for digit in number]
    rows = []
    for row in range(GLYPH_HEIGHT):
        start = row * GLYPH_WIDTH
        rows.append("".join(p[start : start + GLYPH_WIDTH] for p in patterns))
    return rows


def hamming_distance(a: str, b: str) -> int:
    """Count positions at which two equal-length strings differ.

    Raises:
        ValueError: If the strings differ in length
    """
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} != {len(b)}")
    return sum(1 for x, y in zip(a, b) if x != y)


@lru_cache(maxsize=512)
def neighbors(pattern: GlyphPattern) -> FrozenSet[GlyphPattern]:
    """Find known glyphs exactly one character cell away from ``pattern``.

    The input does not have to be a known glyph; it is compared against all
    ten known patterns. Cost is O(10 x 9) per distinct input, which is only
    acceptable because the pattern universe is small and fixed. Results are
    memoised.

    Args:
        pattern: 9-character glyph pattern (possibly corrupted)

    Returns:
        Frozen set of known patterns at Hamming distance exactly 1. Empty if
        the input has the wrong length or no known glyph is one edit away.

    Example:
        >>> sorted(DIGIT_PATTERNS[p] for p in neighbors(" _ |_||_|"))
        ['0', '6', '9']
    """
    if not isinstance(pattern, str) or len(pattern) != GLYPH_SIZE:
        return frozenset()

    return frozenset(
        known for known in DIGIT_PATTERNS if hamming_distance(pattern, known) == 1
    )
