"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator

from minibash.numbers import itoa, itoa_hex, itoa_unsigned

__all__ = ["format_string", "printf"]


def _wrap_int(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >> 31 else value


def _convert(spec: str, args: Iterator[object]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"missing argument for %{spec}") from None
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError("%c expects a single character")
            return value
        return chr(int(value) & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        address = int(value) & 0xFFFFFFFFFFFFFFFF
        if address == 0:
            return "(nil)"
        return "0x" + itoa_hex(address).lower()
    if spec in "di":
        return itoa(_wrap_int(int(value)))
    if spec == "u":
        return itoa_unsigned(int(value))
    hex_text = itoa_hex(int(value) & 0xFFFFFFFF)
    return hex_text.lower() if spec == "x" else hex_text.upper()


def format_string(fmt: str, *args: object) -> str:
    """Expand ``fmt`` with ``args``; unknown conversions produce nothing."""
    values = iter(args)
    pieces: list[str] = []
    position = 0
    while position < len(fmt):
        char = fmt[position]
        if char != "%":
            pieces.append(char)
            position += 1
            continue
        spec = fmt[position + 1:position + 2]
        if spec:
            pieces.append(_convert(spec, values))
        position += 2
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Write the expanded ``fmt`` to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)