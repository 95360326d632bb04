"""Integer parsing and formatting with fixed-width C integer semantics."""

from __future__ import annotations

from minibash.strings import isdigit, strncmp

__all__ = [
    "atoi",
    "atoli",
    "itoa",
    "itoa_unsigned",
    "itoa_hex",
    "litoa",
    "is_numeric",
    "fits_long",
]

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1
_WHITESPACE = " \t\n\v\f\r"
_LONG_FLOOR_TEXT = "-9223372036854775807"


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's complement integer of ``bits`` width."""
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _parse_leading(text: str) -> tuple[int, int]:
    """Parse optional whitespace, one sign and a run of digits.

    Returns the sign and the unsigned magnitude; parsing stops quietly at the
    first character that does not fit.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    magnitude = 0
    for char in rest:
        if not isdigit(char):
            break
        magnitude = magnitude * 10 + (ord(char) - ord("0"))
    return sign, magnitude


def atoi(text: str) -> int:
    """Convert the leading integer of ``text``, wrapping like a 32-bit int."""
    sign, magnitude = _parse_leading(text)
    return _wrap_signed(sign * magnitude, 32)


def atoli(text: str | None) -> int:
    """Convert the leading integer of ``text``, wrapping like a 64-bit long."""
    if text is None:
        return 0
    sign, magnitude = _parse_leading(text)
    return _wrap_signed(sign * magnitude, 64)


def itoa(number: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)


def itoa_unsigned(number: int) -> str:
    """Format ``number`` as a 32-bit unsigned integer in decimal."""
    return str(number & 0xFFFFFFFF)


def itoa_hex(number: int) -> str:
    """Format ``number`` as a 64-bit unsigned integer in upper-case hexadecimal."""
    return format(number & 0xFFFFFFFFFFFFFFFF, "X")


def litoa(number: int) -> str:
    """Format a 64-bit signed integer; the lowest values collapse to -LONG_MAX."""
    number = _wrap_signed(number, 64)
    if number <= -_LONG_MAX:
        return _LONG_FLOOR_TEXT
    return str(number)


def is_numeric(arg: str) -> bool:
    """True when ``arg`` is optional whitespace, one sign, then only digits."""
    rest = arg.lstrip(_WHITESPACE)
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    return bool(rest) and all(isdigit(char) for char in rest)


def fits_long(number: int, original: str) -> bool:
    """Tell whether ``number``, parsed from ``original``, kept its value.

    The decimal form of ``number`` is compared with the digits of
    ``original`` with whitespace, sign and leading zeros removed.
    """
    copy = litoa(number)
    if not original.startswith("-") and copy.startswith("-"):
        return False
    digits = original.lstrip(_WHITESPACE)
    if digits[:1] in ("+", "-"):
        digits = digits[1:]
    digits = digits.lstrip("0")
    copy = copy.removeprefix("-")
    return strncmp(copy, digits, len(digits)) == 0