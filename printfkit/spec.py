"""Parsing of conversion specifications inside a format string."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass
from typing import Iterator

INT_MAX = 2**31 - 1

FLAGS = "-+ #0"
CONVERSIONS = "cspdiuxX%fFeEnok"

_FLAG_ATTRS = {
    "-": "minus",
    "+": "plus",
    " ": "space",
    "#": "hash",
    "0": "zero",
}


class FormatError(ValueError):
    """Raised when a format string or its arguments cannot be rendered."""


class Length(enum.IntEnum):
    """Length modifier of a conversion specification."""

    NONE = 0
    HH = 1
    H = 2
    LL = 3
    L = 4
    J = 5
    Z = 6
    T = 7
    BIG_L = 8


# Longer tokens come before their prefixes so "hh" wins over "h".
_LENGTH_TOKENS = (
    ("hh", Length.HH),
    ("h", Length.H),
    ("ll", Length.LL),
    ("l", Length.L),
    ("j", Length.J),
    ("z", Length.Z),
    ("t", Length.T),
    ("L", Length.BIG_L),
)


@dataclass
class Spec:
    """One parsed conversion specification."""

    minus: bool = False
    plus: bool = False
    space: bool = False
    hash: bool = False
    zero: bool = False
    width: int = 0
    dot: bool = False
    precision: int = 0
    length: Length = Length.NONE
    conversion: str = ""


def _c_int(value: int) -> int:
    """Wrap an integer to the range of a 32-bit signed int."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _next_int(args: Iterator) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise FormatError("not enough arguments for '*'") from None
    try:
        return _c_int(operator.index(value))
    except TypeError:
        raise FormatError(f"'*' expects an integer, got {value!r}") from None


def read_number(fmt: str, pos: int, args: Iterator) -> tuple[int, int]:
    """Read a width or precision: '*' takes an int argument, else digits.

    Returns the value and the position after it. Digits exceeding INT_MAX
    raise FormatError.
    """
    if fmt[pos:pos + 1] == "*":
        return _next_int(args), pos + 1
    value = 0
    while pos < len(fmt) and "0" <= fmt[pos] <= "9":
        value = value * 10 + (ord(fmt[pos]) - ord("0"))
        if value > INT_MAX:
            raise FormatError("field width or precision too large")
        pos += 1
    return value, pos


def parse_flags(fmt: str, pos: int, spec: Spec) -> int:
    """Read flag characters in any order; a repeated flag is an error."""
    while (char := fmt[pos:pos + 1]) and char in _FLAG_ATTRS:
        attr = _FLAG_ATTRS[char]
        if getattr(spec, attr):
            raise FormatError(f"duplicate flag {char!r}")
        setattr(spec, attr, True)
        pos += 1
    return pos


def parse_width(fmt: str, pos: int, spec: Spec, args: Iterator) -> int:
    """Read the minimum field width."""
    spec.width, pos = read_number(fmt, pos, args)
    return pos


def parse_precision(fmt: str, pos: int, spec: Spec, args: Iterator) -> int:
    """Read an optional '.' followed by a precision number."""
    if fmt[pos:pos + 1] == ".":
        spec.dot = True
        pos += 1
    spec.precision, pos = read_number(fmt, pos, args)
    return pos


def parse_length(fmt: str, pos: int, spec: Spec) -> int:
    """Read an optional length modifier."""
    for token, length in _LENGTH_TOKENS:
        if fmt.startswith(token, pos):
            spec.length = length
            return pos + len(token)
    return pos


def parse_conversion(fmt: str, pos: int, spec: Spec) -> int:
    """Read the conversion character."""
    char = fmt[pos:pos + 1]
    if not char or char not in CONVERSIONS:
        raise FormatError(f"unknown conversion {char!r}" if char else "incomplete conversion")
    spec.conversion = char
    return pos + 1


def parse_spec(fmt: str, pos: int, args: Iterator) -> tuple[Spec, int]:
    """Parse a specification starting just after '%'.

    Returns the specification and the position after it.
    """
    spec = Spec()
    pos = parse_flags(fmt, pos, spec)
    pos = parse_width(fmt, pos, spec, args)
    pos = parse_precision(fmt, pos, spec, args)
    pos = parse_length(fmt, pos, spec)
    pos = parse_conversion(fmt, pos, spec)
    return spec, pos