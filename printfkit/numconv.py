"""Numeric conversions: %d %i %u %x %X %o %k %f %F %e %E %p."""

from __future__ import annotations

import operator
from typing import Iterator

from printfkit.buffer import OutputBuffer
from printfkit.floats import handle_float, read_float
from printfkit.integers import (
    add_unsigned,
    handle_signed,
    handle_unsigned,
    read_signed,
    read_unsigned,
    unsigned_length,
)
from printfkit.spec import FormatError, Length, Spec

BASE_8 = "01234567"
BASE_10 = "0123456789"
BASE_16_LOW = "0123456789abcdef"
BASE_16_UP = "0123456789ABCDEF"

NIL = "(nil)"

_POINTER_BITS = 64


def _reject(spec: Spec, flags: str, *, lengths: tuple[Length, ...] = ()) -> None:
    """Raise FormatError if any named flag is set or the length is listed."""
    for flag in flags:
        if getattr(spec, flag):
            raise FormatError(f"flag '{flag}' not valid for %{spec.conversion}")
    if spec.length in lengths:
        raise FormatError(
            f"length modifier {spec.length.name} not valid for %{spec.conversion}"
        )


def convert_int(args: Iterator, spec: Spec, out: OutputBuffer) -> None:
    """Render %d / %i."""
    _reject(spec, ("hash",), lengths=(Length.BIG_L,))
    handle_signed(read_signed(args, spec), BASE_10, spec, out)


def convert_unsigned(args: Iterator, spec: Spec, out: OutputBuffer) -> None:
    """Render %u."""
    _reject(spec, ("hash", "space", "plus"), lengths=(Length.BIG_L,))
    handle_unsigned(read_unsigned(args, spec), BASE_10, spec, out)


def convert_hex(args: Iterator, spec: Spec, out: OutputBuffer) -> None:
    """Render %x / %X."""
    _reject(spec, ("space", "plus"), lengths=(Length.BIG_L,))
    base = BASE_16_UP if spec.conversion == "X" else BASE_16_LOW
    handle_unsigned(read_unsigned(args, spec), base, spec, out)


def convert_octal(args: Iterator, spec: Spec, out: OutputBuffer) -> None:
    """Render %o."""
    _reject(spec, ("space", "plus"), lengths=(Length.BIG_L,))
    handle_unsigned(read_unsigned(args, spec), BASE_8, spec, out)


def check_base(base: object) -> str:
    """Validate a custom digit set.

    It must be a string of at least two printable, non-blank characters
    with no character repeated.
    """
    if not isinstance(base, str) or len(base) < 2:
        raise FormatError(f"invalid base {base!r}")
    for index, char in enumerate(base):
        code = ord(char)
        if char == " " or 9 <= code <= 13:
            raise FormatError(f"base {base!r} contains whitespace")
        if not 32 <= code <= 126:
            raise FormatError(f"base {base!r} contains a non-printable character")
        if char in base[index + 1:]:
            raise FormatError(f"base {base!r} repeats {char!r}")
    return base


def convert_base(args: Iterator, spec: Spec, out: OutputBuffer) -> None:
    """Render %k: an unsigned number followed by its digit-set argument."""
    _reject(spec, ("hash", "space", "plus"), lengths=(Length.BIG_L,))
    nb = read_unsigned(args, spec)
    try:
        raw_base = next(args)
    except StopIteration:
        raise FormatError("not enough arguments") from None
    base = check_base(raw_base)
    if base[0] != "0":
        # Zero padding makes no sense when the zero digit is not '0'.
        spec.precision = 0
    handle_unsigned(nb, base, spec, out)


def convert_float(args: Iterator, spec: Spec, out: OutputBuffer) -> None:
    """Render %f / %F / %e / %E."""
    if spec.length not in (Length.NONE, Length.BIG_L):
        raise FormatError(
            f"length modifier {spec.length.name} not valid for %{spec.conversion}"
        )
    handle_float(read_float(args, spec), spec, out)


def _read_address(args: Iterator) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise FormatError("not enough arguments") from None
    if value is None:
        return 0
    try:
        address = operator.index(value)
    except TypeError:
        raise FormatError(f"expected an address, got {value!r}") from None
    return address & ((1 << _POINTER_BITS) - 1)


def convert_pointer(args: Iterator, spec: Spec, out: OutputBuffer) -> None:
    """Render %p: an integer address, or None / 0 as "(nil)"."""
    _reject(spec, ("zero", "hash", "space", "plus", "dot"))
    if spec.length != Length.NONE:
        raise FormatError(f"length modifier {spec.length.name} not valid for %p")
    address = _read_address(args)
    if address:
        padding = spec.width - (unsigned_length(address, BASE_16_LOW, spec) + 2)
        if not spec.minus:
            out.fill(padding, " ")
        out.add_text("0x")
        add_unsigned(address, BASE_16_LOW, spec, out)
        if spec.minus:
            out.fill(padding, " ")
    else:
        padding = spec.width - len(NIL)
        if not spec.minus:
            out.fill(padding, " ")
        out.add_text(NIL)
        if spec.minus:
            out.fill(padding, " ")