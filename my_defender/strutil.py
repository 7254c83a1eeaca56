"""Small string helpers used by the game for numbers and comparisons."""

from __future__ import annotations

import sys


def get_nbr(text: str) -> int:
    """Parse a leading signed integer.

    Any run of '+' and '-' signs comes first, each '-' flipping the sign.
    Digits are then read until the first non-digit character.
    """
    sign = 1
    rest = text
    while rest and rest[0] in "+-":
        if rest[0] == "-":
            sign = -sign
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return value * sign


def _check_strings(first: object, second: object) -> None:
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("both arguments must be strings")


def _difference(first: str, second: str) -> int:
    for left, right in zip(first + "\0", second + "\0"):
        if left != right:
            return ord(left) - ord(right)
        if left == "\0":
            break
    return 0


def compare(first: str, second: str) -> int:
    """Return the code-point difference at the first mismatch, or 0."""
    _check_strings(first, second)
    return _difference(first, second)


def compare_n(first: str, second: str, limit: int) -> int:
    """Like :func:`compare`, looking at no more than ``limit`` characters."""
    _check_strings(first, second)
    if limit <= 0:
        return 0
    return _difference(first[:limit], second[:limit])


def nbr_to_str(number: int) -> str:
    """Render the digits of a positive number; zero and negatives give ''."""
    if number <= 0:
        return ""
    return str(number)


def reverse(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def put_str(text: str | None) -> None:
    """Write ``text`` to standard output when it is not None."""
    if text is not None:
        sys.stdout.write(text)
        sys.stdout.flush()