"""Type definitions for the policy number OCR module.

This module defines the core data structures shared by the parser, the
corrector and the batch processor: glyph patterns, entries, status tags
and correction results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

# Three rows of three characters, row-concatenated (e.g. " _ | ||_|" for 0)
GlyphPattern = str

# Exactly 9 glyph patterns, left-to-right digit order
Entry = Tuple[GlyphPattern, ...]

# 9 characters over '0'-'9' and the '?' sentinel
DigitString = str

UNKNOWN = "?"
DIGITS_PER_ENTRY = 9
GLYPH_WIDTH = 3
GLYPH_HEIGHT = 3
GLYPH_SIZE = GLYPH_WIDTH * GLYPH_HEIGHT
ROW_WIDTH = DIGITS_PER_ENTRY * GLYPH_WIDTH  # 27 characters per glyph row
LINES_PER_ENTRY = GLYPH_HEIGHT + 1  # 3 glyph rows + blank separator


class StatusTag(Enum):
    """Status of a parsed or corrected policy number."""

    NONE = ""  # All digits present and checksum valid
    ILL = "ILL"  # Contains at least one unrecognised glyph
    ERR = "ERR"  # All digits present but checksum invalid
    AMB = "AMB"  # Several equally valid repairs, tie-break inconclusive

    def suffix(self) -> str:
        """Return the output suffix for this tag (empty for NONE).

        Returns:
            " ILL", " ERR", " AMB" or "".
        """
        return f" {self.value}" if self.value else ""


@dataclass(frozen=True)
class CorrectionResult:
    """Result of running the corrector on one entry.

    Attributes:
        number: Final DigitString (corrected when a unique repair was found)
        status: Final status tag
        original: DigitString parsed from the entry before any correction
        original_status: Status derived from ``original``
        candidates: Distinct checksum-valid repairs found, sorted
    """

    number: DigitString
    status: StatusTag
    original: DigitString
    original_status: StatusTag
    candidates: Tuple[DigitString, ...] = field(default_factory=tuple)

    @property
    def correction_applied(self) -> bool:
        """Whether the returned number differs from the raw parse."""
        return self.number != self.original

    def is_ok(self) -> bool:
        """Check if the final status is NONE.

        Returns:
            True if the number is legible and passes the checksum.
        """
        return self.status == StatusTag.NONE

    def as_tuple(self) -> Tuple[DigitString, StatusTag]:
        return (self.number, self.status)
