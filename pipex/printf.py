"""Formatted output in the style of printf, writing to raw file descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any

from .formatspec import FormatSpec, parse_spec


class _Output:
    """Collects written text and counts the characters that are reported."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self.count = 0

    def put(self, text: str) -> None:
        self._parts.append(text)
        self.count += len(text)

    def put_uncounted(self, text: str) -> None:
        self._parts.append(text)

    @property
    def text(self) -> str:
        return "".join(self._parts)


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _prefix(spec: FormatSpec) -> str:
    """Sign or radix prefix printed once before a number."""
    if spec.specifier in "cs":
        return ""
    if spec.negative:
        return "-"
    if spec.hash:
        if spec.uppercase:
            return "0X"
        if spec.lowercase:
            return "0x"
        return ""
    if spec.space:
        return " "
    if spec.plus:
        return "+"
    return ""


def _put_body(out: _Output, spec: FormatSpec) -> None:
    body = spec.body
    if spec.specifier == "s" and 0 <= spec.precision < len(body):
        if spec.precision == 0:
            out.put_uncounted("\0")
        else:
            out.put(body[: spec.precision])
    else:
        out.put(body)


def _print_char(out: _Output, spec: FormatSpec) -> None:
    char = spec.body
    width = spec.width
    if width <= 1:
        out.put(char)
    elif spec.left_justify:
        out.put(char + " " * (width - 1))
    else:
        pad = "0" if spec.zero_pad else " "
        out.put(pad * (width - 1) + char)


def _print_text(out: _Output, spec: FormatSpec) -> None:
    prefix = _prefix(spec)
    fill = spec.width - len(spec.body)
    if spec.width < 1:
        out.put(prefix)
        _put_body(out, spec)
    elif spec.left_justify:
        out.put(prefix)
        _put_body(out, spec)
        out.put(" " * fill)
    elif spec.zero_pad:
        out.put(prefix + "0" * fill)
        _put_body(out, spec)
    else:
        out.put(" " * fill + prefix)
        _put_body(out, spec)


def _format(fmt: str, args: tuple[Any, ...]) -> tuple[_Output, bool]:
    """Expand ``fmt``; the flag is False if an invalid conversion stopped it."""
    values = iter(args)
    out = _Output()
    pos = 0
    while pos < len(fmt):
        if fmt[pos] == "%" and pos + 1 < len(fmt):
            try:
                spec, pos = parse_spec(fmt, pos + 1, values)
            except ValueError:
                return out, False
            value = None if spec.specifier == "%" else _next_arg(values)
            converted = spec.convert(value)
            if spec.specifier in "%c":
                _print_char(out, converted)
            else:
                _print_text(out, converted)
        else:
            out.put(fmt[pos])
            pos += 1
    return out, True


def render(fmt: str, *args: Any) -> str:
    """Return the text ``fmt`` expands to with ``args``.

    Raises ``ValueError`` for an invalid conversion and ``TypeError``
    when arguments run out.
    """
    out, ok = _format(fmt, args)
    if not ok:
        raise ValueError(f"invalid conversion specification in {fmt!r}")
    return out.text


def printf_fd(fd: int, fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to ``fd`` and return the characters counted.

    On an invalid conversion the text before it is still written and 0
    is returned.
    """
    out, ok = _format(fmt, args)
    text = out.text
    if text:
        os.write(fd, text.encode("utf-8"))
    return out.count if ok else 0


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to standard output."""
    return printf_fd(1, fmt, *args)