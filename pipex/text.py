"""String helpers used to split command lines and search environment entries."""

from __future__ import annotations

_WHITESPACE = " \n\t\v\f\r"
_DIGITS = "0123456789"


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty fields."""
    return [word for word in text.split(sep) if word]


def count_words(text: str, sep: str) -> int:
    """Count the non-empty fields of ``text`` separated by ``sep``."""
    return len(split(text, sep))


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    An optional single sign is accepted; parsing stops at the first
    non-digit. Text without digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(int(number))


def strtrim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` within the first ``limit`` characters of ``haystack``.

    Returns the index of the first occurrence, or ``None`` when absent.
    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if limit < 0:
        raise ValueError("limit must not be negative")
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def strcspn(text: str, separators: str) -> int:
    """Length of the leading part of ``text`` holding no character of ``separators``."""
    for index, char in enumerate(text):
        if char in separators:
            return index
    return len(text)


def strsep(text: str, separators: str) -> tuple[str, str | None]:
    """Cut the first token off ``text``.

    Returns the token and the remainder after the separator, or ``None``
    as the remainder when no separator was found.
    """
    cut = strcspn(text, separators)
    if cut < len(text):
        return text[:cut], text[cut + 1:]
    return text, None


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters; return the difference of the first mismatch."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    left = first[:limit]
    right = second[:limit]
    for position in range(min(limit, max(len(left), len(right)) + 1)):
        a = left[position] if position < len(left) else "\0"
        b = right[position] if position < len(right) else "\0"
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def join_three(first: str, second: str, third: str) -> str:
    """Concatenate three strings."""
    return f"{first}{second}{third}"