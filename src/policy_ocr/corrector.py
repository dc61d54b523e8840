"""Single-segment error correction for parsed policy numbers.

When an entry is illegible (ILL) or fails the checksum (ERR), the scanner
most likely dropped or added one segment of one digit. The corrector tries
every such repair:

1. For each of the 9 glyph slots, substitute every known glyph that is
   exactly one character cell away from the scanned glyph.
2. Re-parse the trial entry; keep it if it is fully legible and passes the
   checksum.
3. Collect the distinct valid numbers.

Resolution:
    - one candidate: accept it (status NONE)
    - no candidate: keep the raw parse and its ILL/ERR status
    - several: keep only candidates divisible by 13. A single survivor is
      accepted (status NONE); otherwise the entry is AMB.

Example:
    >>> number, status = correct(entry)
    >>> print(number, status.name)
    345882865 NONE
"""

import logging
from typing import Iterable, List, Optional, Set, Tuple

from .config_loader import CorrectionConfig
from .glyphs import neighbors
from .parser import parse_entry
from .types import UNKNOWN, CorrectionResult, DigitString, Entry, StatusTag
from .validator import is_divisible_by_13, is_valid

logger = logging.getLogger(__name__)


def derive_status(number: DigitString) -> StatusTag:
    """Derive the status tag of an uncorrected digit string.

    Returns:
        ILL if ``number`` contains '?', ERR if it fails the checksum,
        NONE otherwise.
    """
    if UNKNOWN in number:
        return StatusTag.ILL
    if not is_valid(number):
        return StatusTag.ERR
    return StatusTag.NONE


class PolicyCorrector:
    """Repairs ILL/ERR entries by single-segment neighbour search.

    Args:
        config: Correction configuration. Defaults to correction enabled.

    Example:
        >>> corrector = PolicyCorrector(CorrectionConfig(enabled=True))
        >>> result = corrector.correct(entry)
        >>> print(result.number)
        '345882865'
    """

    def __init__(self, config: Optional[CorrectionConfig] = None):
        self.config = config if config is not None else CorrectionConfig()

    def correct(self, entry: Entry) -> CorrectionResult:
        """Parse an entry and repair it if needed.

        Args:
            entry: 9 glyph patterns

        Returns:
            CorrectionResult with the final number and status.

        Raises:
            ValueError: If the entry is malformed (see ``parse_entry``)
        """
        raw = parse_entry(entry)
        original_status = derive_status(raw)

        if original_status == StatusTag.NONE or not self.config.enabled:
            return CorrectionResult(
                number=raw,
                status=original_status,
                original=raw,
                original_status=original_status,
            )

        candidates = self.find_candidates(entry)
        number, status = self._resolve(raw, original_status, candidates)

        logger.debug(
            f"Corrected {raw} ({original_status.name}) -> {number} ({status.name}), "
            f"candidates={sorted(candidates)}"
        )

        return CorrectionResult(
            number=number,
            status=status,
            original=raw,
            original_status=original_status,
            candidates=tuple(sorted(candidates)),
        )

    def find_candidates(self, entry: Entry) -> Set[DigitString]:
        """Collect distinct valid numbers reachable by one single-segment edit.

        Args:
            entry: 9 glyph patterns

        Returns:
            Set of legible, checksum-valid digit strings.
        """
        candidates: Set[DigitString] = set()
        slots = list(entry)

        for position, pattern in enumerate(entry):
            for replacement in neighbors(pattern):
                slots[position] = replacement
                trial = parse_entry(slots)
                if UNKNOWN not in trial and is_valid(trial):
                    candidates.add(trial)

            # Restore original glyph
            slots[position] = pattern

        return candidates

    @staticmethod
    def _resolve(
        raw: DigitString,
        original_status: StatusTag,
        candidates: Set[DigitString],
    ) -> Tuple[DigitString, StatusTag]:
        if len(candidates) == 1:
            return next(iter(candidates)), StatusTag.NONE

        if not candidates:
            return raw, original_status

        survivors = [c for c in candidates if is_divisible_by_13(c)]
        if len(survivors) == 1:
            return survivors[0], StatusTag.NONE

        return raw, StatusTag.AMB

    def correct_many(self, entries: Iterable[Entry]) -> List[CorrectionResult]:
        """Correct a batch of entries in order."""
        return [self.correct(entry) for entry in entries]


_default_corrector = PolicyCorrector()


def correct(entry: Entry) -> Tuple[DigitString, StatusTag]:
    """Parse and repair one entry with correction enabled.

    Returns:
        Tuple of (number, status).

    Raises:
        ValueError: If the entry is malformed
    """
    return _default_corrector.correct(entry).as_tuple()
