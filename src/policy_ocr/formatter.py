"""Output line formatting for parsed and corrected policy numbers."""

from .corrector import derive_status
from .types import DigitString, StatusTag


def format_result(raw: DigitString) -> str:
    """Format a raw parse for plain (non-correcting) output.

    Example:
        >>> format_result("86110??36")
        '86110??36 ILL'
        >>> format_result("111111111")
        '111111111 ERR'
        >>> format_result("345882865")
        '345882865'
    """
    return f"{raw}{derive_status(raw).suffix()}"


def format_corrected(number: DigitString, status: StatusTag) -> str:
    """Format a corrector result: the number alone for NONE, else "<number> <TAG>"."""
    return f"{number}{status.suffix()}"
