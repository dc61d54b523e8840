"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures that are available
to all test modules.
"""

from pathlib import Path

import pytest

from policy_ocr.glyphs import pattern_for, render

SAMPLE_PATH = Path(__file__).resolve().parent.parent / "sample.txt"


def entry_for(number):
    """Build the 9-glyph entry that draws ``number``."""
    return tuple(pattern_for(digit) for digit in number)


def lines_for(*numbers):
    """Build raw input lines (3 glyph rows + blank) for each number."""
    lines = []
    for number in numbers:
        lines.extend(render(number))
        lines.append("")
    return lines


@pytest.fixture
def make_entry():
    """Fixture providing the number -> entry builder."""
    return entry_for


@pytest.fixture
def make_lines():
    """Fixture providing the numbers -> input lines builder."""
    return lines_for


@pytest.fixture
def sample_path():
    """Fixture providing the bundled sample input (11 entries, 44 lines)."""
    return SAMPLE_PATH


@pytest.fixture
def write_input(tmp_path):
    """Fixture writing numbers to an input file and returning its path."""

    def _write(*numbers, name="input.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines_for(*numbers)) + "\n", encoding="utf-8")
        return path

    return _write
