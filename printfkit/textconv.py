"""Text conversions: %c %s %% and the %n write-back conversion."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterator

from printfkit.buffer import OutputBuffer
from printfkit.spec import INT_MAX, FormatError, Length, Spec

NULL = "(null)"

# Bit width and signedness of the C object each length modifier targets.
_COUNT_TYPES = {
    Length.NONE: (32, True),
    Length.HH: (8, True),
    Length.H: (16, True),
    Length.L: (64, True),
    Length.LL: (64, True),
    Length.J: (64, True),
    Length.Z: (64, False),
    Length.T: (64, True),
}


@dataclass
class CountRef:
    """Receives the number of characters produced so far by a %n conversion."""

    value: int = 0


def _next_arg(args: Iterator) -> object:
    try:
        return next(args)
    except StopIteration:
        raise FormatError("not enough arguments") from None


def _reject_flags(spec: Spec, flags: tuple[str, ...]) -> None:
    for flag in flags:
        if getattr(spec, flag):
            raise FormatError(f"flag '{flag}' not valid for %{spec.conversion}")


def _reject_length(spec: Spec) -> None:
    raise FormatError(
        f"length modifier {spec.length.name} not valid for %{spec.conversion}"
    )


def _read_char(args: Iterator, spec: Spec) -> str:
    value = _next_arg(args)
    if isinstance(value, str) and len(value) == 1:
        return value
    try:
        code = operator.index(value)
    except TypeError:
        raise FormatError(f"expected a character, got {value!r}") from None
    if spec.length == Length.L:
        try:
            return chr(code)
        except (ValueError, OverflowError):
            raise FormatError(f"invalid wide character {code!r}") from None
    return chr(code & 0xFF)


def convert_char(args: Iterator, spec: Spec, out: OutputBuffer) -> None:
    """Render %c from a one-character string or a character code."""
    _reject_flags(spec, ("zero", "hash", "space", "plus", "dot"))
    if spec.length not in (Length.NONE, Length.L):
        _reject_length(spec)
    char = _read_char(args, spec)
    if spec.minus:
        out.add(char)
        out.fill(spec.width - 1, " ")
    else:
        out.fill(spec.width - 1, " ")
        out.add(char)


def convert_string(args: Iterator, spec: Spec, out: OutputBuffer) -> None:
    """Render %s; None prints as "(null)"."""
    _reject_flags(spec, ("zero", "hash", "space", "plus"))
    if spec.length != Length.NONE:
        _reject_length(spec)
    value = _next_arg(args)
    if value is None:
        value = NULL
    if not isinstance(value, str):
        raise FormatError(f"expected a string, got {value!r}")
    if len(value) > INT_MAX:
        raise FormatError("string argument too long")
    shown = spec.precision if spec.dot and len(value) >= spec.precision else len(value)
    text = value[:max(shown, 0)]
    if spec.minus:
        out.add_text(text)
        out.fill(spec.width - shown, " ")
    else:
        out.fill(spec.width - shown, " ")
        out.add_text(text)


def convert_percent(args: Iterator, spec: Spec, out: OutputBuffer) -> None:
    """Render %% as a literal percent sign; no flags, width or length allowed."""
    _reject_flags(spec, ("minus", "zero", "hash", "space", "plus", "dot"))
    if spec.width:
        raise FormatError("width not valid for %%")
    if spec.length != Length.NONE:
        _reject_length(spec)
    out.add("%")


def convert_count(args: Iterator, spec: Spec, out: OutputBuffer) -> None:
    """Store the count of characters produced so far into a CountRef."""
    _reject_flags(spec, ("minus", "zero", "hash", "space", "plus", "dot"))
    if spec.width:
        raise FormatError("width not valid for %n")
    if spec.length == Length.BIG_L:
        _reject_length(spec)
    target = _next_arg(args)
    if not isinstance(target, CountRef):
        raise FormatError(f"%n expects a CountRef, got {target!r}")
    bits, signed = _COUNT_TYPES[spec.length]
    count = len(out) & ((1 << bits) - 1)
    if signed and count >= 1 << (bits - 1):
        count -= 1 << bits
    target.value = count