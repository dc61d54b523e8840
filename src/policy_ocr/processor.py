"""Batch processor for policy number OCR files.

This module orchestrates the complete workflow for one input file:
    1. INPUT: read lines and group them into 9-glyph entries
    2. PARSE: map each glyph to a digit ('?' when unrecognised)
    3. CORRECT: repair ILL/ERR entries by single-segment search
    4. FORMAT: render one output line per entry

Two output modes are supported:
    - plain mode (correction disabled): "<raw>", "<raw> ILL" or "<raw> ERR"
    - correction mode: "<number>" or "<number> ILL|ERR|AMB"

The input shape is validated before any entry is processed. After that no
single entry can abort the batch: every entry yields exactly one line.

Example:
    >>> from pathlib import Path
    >>> from policy_ocr import PolicyProcessor
    >>> processor = PolicyProcessor()
    >>> batch = processor.process_file(Path("sample.txt"))
    >>> print("\\n".join(batch.lines))
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .config_loader import Config, get_default_config, load_config
from .corrector import PolicyCorrector
from .formatter import format_corrected, format_result
from .parser import group_lines, read_entries
from .types import CorrectionResult, Entry, StatusTag

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Result of processing one batch of entries.

    Attributes:
        results: Per-entry correction results, in input order
        lines: Formatted output lines, one per entry
        correction_enabled: Whether correction mode was used
        processing_time_ms: Wall time spent on parsing and correction
    """

    results: List[CorrectionResult] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)
    correction_enabled: bool = True
    processing_time_ms: float = 0.0

    def __len__(self) -> int:
        return len(self.results)

    def status_counts(self) -> Dict[str, int]:
        """Count entries per final status.

        Returns:
            Dictionary keyed by status name (NONE, ILL, ERR, AMB), all present.
        """
        counts = {tag.name: 0 for tag in StatusTag}
        for result in self.results:
            counts[result.status.name] += 1
        return counts

    def corrected_count(self) -> int:
        """Number of entries whose reported number differs from the raw parse."""
        return sum(1 for result in self.results if result.correction_applied)


class PolicyProcessor:
    """Runs parsing, correction and formatting over whole input files.

    Args:
        config_path: Optional path to config YAML file. If None, uses default config.
        config: Already-loaded configuration; takes precedence over ``config_path``.

    Attributes:
        config: Full configuration object
        corrector: Single-segment corrector built from ``config``
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        config: Optional[Config] = None,
    ):
        if config is not None:
            self.config: Config = config
        elif config_path is None:
            self.config = get_default_config()
        else:
            self.config = load_config(config_path)

        self.corrector = PolicyCorrector(config=self.config.policy_ocr.correction)

        logger.info(
            f"Initialized policy OCR processor: "
            f"correction={self.correction_enabled}, workers={self.workers}"
        )

    @property
    def correction_enabled(self) -> bool:
        return self.config.policy_ocr.correction.enabled

    @property
    def workers(self) -> int:
        return self.config.policy_ocr.processing.workers

    def process_entries(self, entries: Sequence[Entry]) -> BatchResult:
        """Correct and format a batch of entries.

        Args:
            entries: Entries in input order

        Returns:
            BatchResult with one result and one output line per entry.

        Raises:
            ValueError: If an entry is malformed (not 9 patterns of 9 characters)
        """
        start_time = time.perf_counter()

        if self.workers > 1 and len(entries) > 1:
            # executor.map preserves input order
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                results = list(executor.map(self.corrector.correct, entries))
        else:
            results = self.corrector.correct_many(entries)

        if self.correction_enabled:
            lines = [format_corrected(r.number, r.status) for r in results]
        else:
            lines = [format_result(r.original) for r in results]

        batch = BatchResult(
            results=results,
            lines=lines,
            correction_enabled=self.correction_enabled,
            processing_time_ms=(time.perf_counter() - start_time) * 1000,
        )

        logger.info(
            f"Processed {len(batch)} entries in {batch.processing_time_ms:.1f}ms: "
            f"{batch.status_counts()}, corrected={batch.corrected_count()}"
        )
        return batch

    def process_lines(self, lines: Sequence[str]) -> BatchResult:
        """Process raw input lines (newlines stripped).

        Raises:
            ValueError: If the line count is not a multiple of 4 or a row is malformed
        """
        return self.process_entries(group_lines(lines))

    def process_file(self, input_path: Union[str, Path]) -> BatchResult:
        """Process one input file.

        Raises:
            FileNotFoundError: If the input file does not exist
            ValueError: If the input file is malformed
        """
        entries = read_entries(input_path, encoding=self.config.policy_ocr.io.encoding)
        logger.debug(f"Loaded {len(entries)} entries from {input_path}")
        return self.process_entries(entries)

    def write_results(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
    ) -> BatchResult:
        """Process an input file and write one output line per entry.

        Args:
            input_path: Path to the OCR text file
            output_path: Path to write results to (parent directories are created)

        Returns:
            The BatchResult that was written.
        """
        batch = self.process_file(input_path)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding=self.config.policy_ocr.io.encoding) as f:
            for line in batch.lines:
                f.write(f"{line}\n")

        logger.info(f"Wrote {len(batch.lines)} lines to {output_path}")
        return batch

    def get_processing_stats(self) -> dict:
        """Get processor configuration summary.

        Returns:
            Dictionary with the settings that affect output
        """
        return {
            "correction_enabled": self.correction_enabled,
            "workers": self.workers,
            "encoding": self.config.policy_ocr.io.encoding,
            "default_input": self.config.policy_ocr.io.default_input,
        }
