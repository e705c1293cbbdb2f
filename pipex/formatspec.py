"""Parsing and numeric conversion of single printf conversion specifications."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import Any

FLAGS = "-0+ #"
SPECIFIERS = "cspdiuxX%"
NUMERIC = "pdiuxX"

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def to_base(number: int, digits: str) -> str:
    """Write a non-negative ``number`` using ``digits`` as the digit alphabet."""
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        raise ValueError("number must not be negative")
    base = len(digits)
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(out))


def _as_int32(value: Any) -> int:
    number = int(value) & _MASK32
    return number - (1 << 32) if number & (1 << 31) else number


@dataclass(frozen=True)
class FormatSpec:
    """One parsed conversion such as ``%-08.3x``.

    After :meth:`convert`, ``body`` holds the converted text and the
    width and flags are adjusted for the sign or prefix still to print.
    """

    specifier: str
    left_justify: bool = False
    zero_pad: bool = False
    plus: bool = False
    space: bool = False
    hash: bool = False
    width: int = 0
    precision: int = -1
    lowercase: bool = False
    uppercase: bool = False
    negative: bool = False
    body: str = ""

    @property
    def digits(self) -> str:
        """Digit alphabet used for this specifier."""
        if self.specifier in "px":
            return HEX_LOWER
        if self.specifier == "X":
            return HEX_UPPER
        return DECIMAL

    @property
    def is_numeric(self) -> bool:
        return self.specifier in NUMERIC

    def convert(self, value: Any) -> FormatSpec:
        """Return a copy of this spec with ``value`` converted into ``body``.

        Numeric conversions also shrink the width by the room a sign or
        ``0x`` prefix will take and apply the precision as leading zeros.
        """
        spec = self.specifier
        if spec == "%":
            return replace(self, body="%")
        if spec == "c":
            char = value if isinstance(value, str) else chr(int(value) & 0xFF)
            return replace(self, body=char)
        if spec == "s":
            return replace(self, body="(null)" if value is None else str(value))
        return self._convert_number(value)

    def _convert_number(self, value: Any) -> FormatSpec:
        spec = self.specifier
        negative = False
        hash_flag, lowercase, zero_pad = self.hash, self.lowercase, self.zero_pad
        if spec in "di":
            number = _as_int32(value)
            negative = number < 0
            body = to_base(abs(number), DECIMAL)
        elif spec == "u":
            body = to_base(int(value) & _MASK32, DECIMAL)
        elif spec == "p":
            address = 0 if value is None else int(value) & _MASK64
            if address == 0:
                body = "(nil)"
                hash_flag = lowercase = zero_pad = False
            else:
                body = to_base(address, HEX_LOWER)
        else:
            number = int(value) & _MASK32
            if number == 0:
                body = "0"
                hash_flag = lowercase = zero_pad = False
            else:
                body = to_base(number, self.digits)

        width = self.width
        if negative:
            width -= 1
        if (self.plus or self.space) and not negative:
            width -= 1
        if hash_flag and (self.uppercase or lowercase):
            width -= 2

        if self.precision >= 0:
            if self.precision < width and zero_pad:
                zero_pad = False
            if self.precision > len(body):
                body = "0" * (self.precision - len(body)) + body

        return replace(
            self,
            negative=negative,
            hash=hash_flag,
            lowercase=lowercase,
            zero_pad=zero_pad,
            width=width,
            body=body,
        )


def _read_number(fmt: str, pos: int, args: Iterator[Any]) -> tuple[int, int]:
    if pos < len(fmt) and fmt[pos] == "*":
        try:
            return int(next(args)), pos + 1
        except StopIteration:
            raise ValueError("missing argument for '*'") from None
    number = 0
    while pos < len(fmt) and fmt[pos] in DECIMAL:
        number = number * 10 + (ord(fmt[pos]) - ord("0"))
        pos += 1
    return number, pos


def parse_spec(fmt: str, pos: int, args: Iterator[Any]) -> tuple[FormatSpec, int]:
    """Parse the conversion starting at ``fmt[pos]``, just after the ``%``.

    ``args`` is an iterator from which ``*`` widths and precisions are
    taken. Returns the spec and the index just past its specifier.
    Raises ``ValueError`` for an unknown or missing specifier.
    """
    args = iter(args)
    flags = {"-": False, "0": False, "+": False, " ": False, "#": False}
    while pos < len(fmt) and fmt[pos] in FLAGS:
        flags[fmt[pos]] = True
        pos += 1
    width, pos = _read_number(fmt, pos, args)
    precision = -1
    if pos < len(fmt) and fmt[pos] == ".":
        pos += 1
        if pos < len(fmt):
            precision, pos = _read_number(fmt, pos, args)
    if pos >= len(fmt) or fmt[pos] not in SPECIFIERS:
        raise ValueError(f"invalid conversion specification in {fmt!r}")
    specifier = fmt[pos]
    hash_flag = flags["#"] or specifier == "p"
    spec = FormatSpec(
        specifier=specifier,
        left_justify=flags["-"],
        zero_pad=flags["0"],
        plus=flags["+"],
        space=flags[" "],
        hash=hash_flag,
        width=width,
        precision=precision,
        lowercase=specifier in "px",
        uppercase=specifier == "X",
    )
    return spec, pos + 1