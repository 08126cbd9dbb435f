"""Rendering of signed and unsigned integer conversions."""

from __future__ import annotations

import operator
from typing import Iterator

from printfkit.buffer import OutputBuffer
from printfkit.spec import FormatError, Length, Spec

# Bit width of the C type each length modifier reads.
_SIGNED_BITS = {
    Length.HH: 8,
    Length.H: 16,
    Length.NONE: 32,
    Length.L: 64,
    Length.LL: 64,
    Length.J: 64,
    Length.Z: 64,
    Length.T: 64,
}

_UNSIGNED_BITS = dict(_SIGNED_BITS)


def _next_integer(args: Iterator) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise FormatError("not enough arguments") from None
    try:
        return operator.index(value)
    except TypeError:
        raise FormatError(f"expected an integer argument, got {value!r}") from None


def _bits_for(spec: Spec, table: dict) -> int:
    try:
        return table[spec.length]
    except KeyError:
        raise FormatError(f"length modifier {spec.length.name} not valid here") from None


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _wrap_signed(value: int, bits: int) -> int:
    value = _wrap_unsigned(value, bits)
    return value - (1 << bits) if value >= 1 << (bits - 1) else value


def read_signed(args: Iterator, spec: Spec) -> int:
    """Take the next argument as a signed integer of the spec's length."""
    return _wrap_signed(_next_integer(args), _bits_for(spec, _SIGNED_BITS))


def read_unsigned(args: Iterator, spec: Spec) -> int:
    """Take the next argument as an unsigned integer of the spec's length."""
    return _wrap_unsigned(_next_integer(args), _bits_for(spec, _UNSIGNED_BITS))


def _digits(magnitude: int, base: str, spec: Spec) -> str:
    """Digits of a non-negative number; empty for zero with precision 0."""
    if magnitude == 0 and spec.dot and spec.precision == 0:
        return ""
    radix = len(base)
    chars = []
    while True:
        magnitude, rem = divmod(magnitude, radix)
        chars.append(base[rem])
        if magnitude == 0:
            break
    return "".join(reversed(chars))


def signed_length(nb: int, base: str, spec: Spec) -> int:
    """Number of digits of nb without its sign."""
    return len(_digits(abs(nb), base, spec))


def add_signed(nb: int, base: str, spec: Spec, out: OutputBuffer) -> None:
    """Append the digits of nb, without sign."""
    out.add_text(_digits(abs(nb), base, spec))


def _sign_length(nb: int, spec: Spec) -> int:
    return 1 if nb < 0 or spec.plus or spec.space else 0


def _add_sign(nb: int, spec: Spec, out: OutputBuffer) -> None:
    if nb < 0:
        out.add("-")
    elif spec.plus:
        out.add("+")
    elif spec.space:
        out.add(" ")


def handle_signed(nb: int, base: str, spec: Spec, out: OutputBuffer) -> None:
    """Render a signed integer with sign, padding and precision."""
    sign_len = _sign_length(nb, spec)
    length = signed_length(nb, base, spec)
    body = max(spec.precision + sign_len, length + sign_len)
    if spec.minus:
        _add_sign(nb, spec, out)
        if spec.dot:
            out.fill(spec.precision - length, "0")
        add_signed(nb, base, spec, out)
        out.fill(spec.width - body, " ")
        return
    if spec.zero and not spec.dot:
        _add_sign(nb, spec, out)
        out.fill(spec.width - (length + sign_len), "0")
    else:
        out.fill(spec.width - body, " ")
        _add_sign(nb, spec, out)
    out.fill(spec.precision - length, "0")
    add_signed(nb, base, spec, out)


def unsigned_length(nb: int, base: str, spec: Spec) -> int:
    """Number of digits of nb in base."""
    return len(_digits(nb, base, spec))


def add_unsigned(nb: int, base: str, spec: Spec, out: OutputBuffer) -> None:
    """Append the digits of nb in base."""
    out.add_text(_digits(nb, base, spec))


def prefix_width(nb: int, spec: Spec) -> int:
    """Length of the '#' prefix as counted against the field width."""
    if spec.hash and nb != 0:
        if spec.conversion == "o":
            return 1
        if spec.conversion in "xX":
            return 2
    return 0


def prefix_precision(nb: int, spec: Spec) -> int:
    """Length of the octal '#' prefix, which counts toward precision."""
    return 1 if spec.hash and spec.conversion == "o" and nb != 0 else 0


def add_prefix(nb: int, spec: Spec, out: OutputBuffer) -> None:
    """Append the pointer or '#' prefix, if any."""
    if spec.conversion == "p":
        out.add_text("0x")
    elif spec.hash and nb != 0:
        if spec.conversion == "x":
            out.add_text("0x")
        elif spec.conversion == "X":
            out.add_text("0X")
        elif spec.conversion == "o":
            out.add("0")


def handle_unsigned(nb: int, base: str, spec: Spec, out: OutputBuffer) -> None:
    """Render an unsigned integer with prefix, padding and precision."""
    length = unsigned_length(nb, base, spec)
    pw = prefix_width(nb, spec)
    pp = prefix_precision(nb, spec)
    body = max(spec.precision - pp + pw, length + pw)
    if spec.minus:
        add_prefix(nb, spec, out)
        if spec.dot:
            out.fill(spec.precision - (length + pp), "0")
        add_unsigned(nb, base, spec, out)
        out.fill(spec.width - body, " ")
        return
    if spec.zero and not spec.dot and base[0] == "0":
        add_prefix(nb, spec, out)
        out.fill(spec.width - (length + pw), "0")
    else:
        out.fill(spec.width - body, " ")
        add_prefix(nb, spec, out)
    out.fill(spec.precision - (length + pp), "0")
    add_unsigned(nb, base, spec, out)