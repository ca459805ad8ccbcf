"""
Sequence utilities.

Conversion of a sequence of digits into an integer.
"""

__all__ = [
    "to_i",
    "Array",
]

from typing import Any, Iterable, Optional

from loguru import logger

from rubysugar.config import CONFIG


def _is_digit(value: Any) -> bool:
    # bool is an int subclass but never a digit
    return isinstance(value, int) and not isinstance(value, bool)


def to_i(sequence: Iterable[Any], base: Optional[int] = None) -> int:
    """
    Combine the integer elements of a sequence into a single integer.

    Integers are read least significant first: the element at position
    ``i`` (counted among integer elements only) is weighted by
    ``base ** i``. Non-integer elements are dropped without error.

    Args:
        sequence: Elements to convert
        base: Positional base (defaults to 10)

    Returns:
        The weighted sum, or 0 if the sequence holds no integers

    Example:
        >>> to_i([1, 2, 3])
        321
        >>> to_i([1, 0, 1], base=2)
        5
        >>> to_i([1, "x", 2])
        21
        >>> to_i(["a", None])
        0
    """
    if base is None:
        base = CONFIG["default_base"]

    items = list(sequence)
    digits = [item for item in items if _is_digit(item)]
    if len(digits) != len(items):
        logger.debug(f"to_i dropped {len(items) - len(digits)} non-integer elements")

    return sum(digit * base**index for index, digit in enumerate(digits))


class Array(list):
    """List with Ruby-style conversion helpers."""

    def to_i(self, base: Optional[int] = None) -> int:
        return to_i(self, base)
