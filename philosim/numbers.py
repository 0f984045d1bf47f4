"""Digit-string helpers used to validate and convert command-line numbers.

Values follow the rules of a 64-bit unsigned long: anything above
``ULONG_MAX`` is refused by validation, and conversions wrap modulo 2**64.
"""

from __future__ import annotations

ULONG_MAX = 2**64 - 1
_ULONG_MODULUS = 2**64
_DIGITS = frozenset("0123456789")
_ULONG_MAX_TEXT = str(ULONG_MAX)


def is_num(text: str | None) -> bool:
    """Return True if *text* is a non-empty string of ASCII digits only."""
    if not text:
        return False
    return all(char in _DIGITS for char in text)


def exceeds_ulong_max(text: str | None) -> bool:
    """Return True if the digit string *text* names a value above ULONG_MAX.

    Leading zeros are ignored. ``None`` never exceeds the limit.
    """
    if text is None:
        return False
    significant = text.lstrip("0")
    if len(significant) != len(_ULONG_MAX_TEXT):
        return len(significant) > len(_ULONG_MAX_TEXT)
    return significant > _ULONG_MAX_TEXT


def atoul(text: str | None) -> int:
    """Convert a digit string to an unsigned long.

    Leading spaces and zeros are skipped; an empty string or ``None`` gives 0.
    The result wraps modulo 2**64 like the unsigned type it models.

    Raises:
        ValueError: if anything other than digits follows the leading spaces.
    """
    if not text:
        return 0
    digits = text.lstrip(" ").lstrip("0")
    if not digits:
        return 0
    if not is_num(digits):
        raise ValueError(f"not an unsigned number: {text!r}")
    return int(digits) % _ULONG_MODULUS


def ultoa(num: int) -> str:
    """Render *num* as a fixed-width decimal string as wide as ULONG_MAX.

    Shorter values are padded with leading zeros, so every result has the
    same length as ``str(ULONG_MAX)``.

    Raises:
        ValueError: if *num* is negative or above ULONG_MAX.
    """
    if num < 0 or num > ULONG_MAX:
        raise ValueError(f"value out of unsigned long range: {num}")
    return str(num).zfill(len(_ULONG_MAX_TEXT))


def digit_len(nb: int) -> int:
    """Return how many decimal digits *nb* has; zero has one digit.

    Raises:
        ValueError: if *nb* is negative.
    """
    if nb < 0:
        raise ValueError(f"negative value: {nb}")
    count = 1
    while nb >= 10:
        nb //= 10
        count += 1
    return count