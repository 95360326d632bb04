"""Byte-string style helpers used by the shell: splitting, trimming, comparison, lookups."""

from __future__ import annotations

__all__ = [
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strcmp",
    "strncmp",
    "strchr",
    "strrchr",
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "toupper",
    "tolower",
]

_NUL = "\0"


def _code(char: str | int) -> int:
    """Return the code point of a one-character string, or the integer itself."""
    if isinstance(char, int):
        return char
    return ord(char)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty words between repeated separators."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every leading and trailing character that appears in ``chars``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0. ``None`` means no match.
    """
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(limit, 0))
    return index if index >= 0 else None


def strcmp(first: str, second: str) -> int:
    """Compare two strings; the result is the difference of the first differing codes."""
    for a, b in zip(first, second):
        if a != b:
            return ord(a) - ord(b)
    if len(first) > len(second):
        return ord(first[len(second)])
    if len(first) < len(second):
        return -ord(second[len(first)])
    return 0


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` leading characters of two strings."""
    if limit <= 0:
        return 0
    return strcmp(first[:limit], second[:limit])


def strchr(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``; NUL matches the end."""
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == _NUL else None


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``; NUL matches the end."""
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def isalpha(char: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(char)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(char: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(char) <= ord("9")


def isalnum(char: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(char) or isdigit(char)


def isascii(char: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(char) <= 127


def isprint(char: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(char) <= 126


def toupper(char: str | int) -> str | int:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return code if isinstance(char, int) else chr(code)


def tolower(char: str | int) -> str | int:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return code if isinstance(char, int) else chr(code)