"""Policy number checksum and format validation.

A policy number is valid when its weighted digit sum is divisible by 11.
Digits are weighted by their position counted from the right:

    number:   3  4  5  8  8  2  8  6  5
    weight:   9  8  7  6  5  4  3  2  1

    (3*9 + 4*8 + 5*7 + 8*6 + 8*5 + 2*4 + 8*3 + 6*2 + 5*1) mod 11 == 0
"""

import re

from .types import DIGITS_PER_ENTRY

_NUMBER_PATTERN = re.compile(r"^[0-9]{9}$")

TIE_BREAK_DIVISOR = 13


def validate_format(text: str) -> bool:
    """Check that ``text`` is exactly 9 ASCII digits.

    Example:
        >>> validate_format("345882865")
        True
        >>> validate_format("34588286?")
        False
    """
    if not isinstance(text, str):
        return False
    return bool(_NUMBER_PATTERN.match(text)) and len(text) == DIGITS_PER_ENTRY


def checksum(number: str) -> int:
    """Calculate the weighted mod-11 checksum of a 9-digit policy number.

    The rightmost digit has weight 1 and each digit to its left one more,
    so the leftmost digit has weight 9. The checksum is the weighted sum
    modulo 11.

    Args:
        number: Exactly 9 characters, each '0'-'9'

    Returns:
        Checksum in the range 0-10 (0 means valid)

    Raises:
        ValueError: If input is not exactly 9 characters
        ValueError: If input contains a non-digit character ('?' included)

    Example:
        >>> checksum("345882865")
        0
        >>> checksum("111111111")
        1
    """
    if not isinstance(number, str) or len(number) != DIGITS_PER_ENTRY:
        length = len(number) if isinstance(number, str) else "non-string"
        raise ValueError(f"Expected {DIGITS_PER_ENTRY} characters, got {length}")

    if not validate_format(number):
        bad = next(c for c in number if c not in "0123456789")
        raise ValueError(f"Invalid character in policy number: {bad!r}")

    total = sum(
        int(char) * weight for weight, char in enumerate(reversed(number), start=1)
    )
    return total % 11


def is_valid(number: str) -> bool:
    """Check whether a policy number passes the checksum.

    Never raises: malformed input (wrong length, '?' or other non-digits)
    is simply not valid.

    Example:
        >>> is_valid("345882865")
        True
        >>> is_valid("34588286?")
        False
    """
    try:
        return checksum(number) == 0
    except ValueError:
        return False


def is_divisible_by_13(number: str) -> bool:
    """Tie-break predicate: ``number`` read as a base-10 integer is divisible by 13.

    Returns False for anything that is not a well-formed 9-digit string.
    """
    if not validate_format(number):
        return False
    return int(number) % TIE_BREAK_DIVISOR == 0
