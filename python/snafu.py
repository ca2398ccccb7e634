"""
Balanced quinary ("SNAFU") numbers (2022 day 25).

Digits are ``=`` (-2), ``-`` (-1), ``0``, ``1`` and ``2``, most significant
first, in base 5.
"""

from __future__ import annotations

_DIGIT_VALUES = {"=": -2, "-": -1, "0": 0, "1": 1, "2": 2}
_VALUE_DIGITS = {value: digit for digit, value in _DIGIT_VALUES.items()}


class SnafuParseError(ValueError):
    """Raised for strings containing characters outside ``=-012``."""


def parse_snafu(text: str) -> int:
    text = text.strip()
    if not text:
        raise SnafuParseError("Empty SNAFU number")
    total = 0
    for i, digit in enumerate(text):
        if digit not in _DIGIT_VALUES:
            raise SnafuParseError(
                f"Invalid SNAFU digit '{digit}' at offset {i} in '{text}'\n"
                f"  Valid digits: '=', '-', '0', '1', '2'"
            )
        total = total * 5 + _DIGIT_VALUES[digit]
    return total


def to_snafu(number: int) -> str:
    """Encode any integer, including zero and negatives."""
    if number == 0:
        return "0"
    digits: list[str] = []
    while number != 0:
        remainder = number % 5
        if remainder > 2:
            remainder -= 5
        digits.append(_VALUE_DIGITS[remainder])
        number = (number - remainder) // 5
    return "".join(reversed(digits))


def fuel_requirement_sum(text: str) -> str:
    """Sum of one SNAFU number per line, written back in SNAFU."""
    return to_snafu(sum(parse_snafu(line) for line in text.splitlines() if line.strip()))
