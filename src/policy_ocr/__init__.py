"""Policy number OCR: parsing, checksum validation and correction.

This module decodes 9-digit policy numbers drawn in 3x3 ASCII-art glyphs,
validates them with a weighted mod-11 checksum and repairs entries that are
one segment away from a valid number.

Core Components:
    - glyphs: Glyph table and single-segment neighbour search
    - parser: Line grouping and glyph-to-digit parsing
    - validator: Checksum and format validation
    - corrector: Single-segment correction with mod-13 tie-break
    - formatter: Output line formatting
    - processor: Batch processing of whole files
    - config_loader: Configuration loading with Pydantic validation

Example:
    >>> from pathlib import Path
    >>> from policy_ocr import PolicyProcessor
    >>> processor = PolicyProcessor()
    >>> batch = processor.process_file(Path("sample.txt"))
    >>> for line in batch.lines:
    ...     print(line)
"""

from .config_loader import (
    Config,
    CorrectionConfig,
    IOConfig,
    LoggingConfig,
    PolicyOCRConfig,
    ProcessingConfig,
    get_default_config,
    load_config,
)
from .corrector import PolicyCorrector, correct, derive_status
from .formatter import format_corrected, format_result
from .glyphs import (
    DIGIT_PATTERNS,
    digit_for,
    hamming_distance,
    neighbors,
    pattern_for,
    render,
)
from .parser import (
    group_lines,
    parse_entry,
    parse_file,
    parse_lines,
    read_entries,
    split_entry,
)
from .processor import BatchResult, PolicyProcessor
from .types import UNKNOWN, CorrectionResult, Entry, StatusTag
from .validator import checksum, is_divisible_by_13, is_valid, validate_format

__all__ = [
    # Types
    "StatusTag",
    "CorrectionResult",
    "Entry",
    "UNKNOWN",
    # Configuration
    "Config",
    "PolicyOCRConfig",
    "CorrectionConfig",
    "ProcessingConfig",
    "IOConfig",
    "LoggingConfig",
    "load_config",
    "get_default_config",
    # Glyphs
    "DIGIT_PATTERNS",
    "digit_for",
    "pattern_for",
    "render",
    "hamming_distance",
    "neighbors",
    # Parsing
    "parse_entry",
    "split_entry",
    "group_lines",
    "read_entries",
    "parse_lines",
    "parse_file",
    # Validation
    "checksum",
    "is_valid",
    "validate_format",
    "is_divisible_by_13",
    # Correction
    "PolicyCorrector",
    "correct",
    "derive_status",
    # Formatting
    "format_result",
    "format_corrected",
    # Processing
    "PolicyProcessor",
    "BatchResult",
]
