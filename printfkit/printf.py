"""Formatting entry points writing to strings or file descriptors."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Iterator

from printfkit.buffer import OutputBuffer
from printfkit.numconv import (
    convert_base,
    convert_float,
    convert_hex,
    convert_int,
    convert_octal,
    convert_pointer,
    convert_unsigned,
)
from printfkit.spec import FormatError, Spec, parse_spec
from printfkit.textconv import (
    convert_char,
    convert_count,
    convert_percent,
    convert_string,
)

STDOUT_FD = 1

_Handler = Callable[[Iterator, Spec, OutputBuffer], None]

_HANDLERS: dict[str, _Handler] = {
    "c": convert_char,
    "s": convert_string,
    "p": convert_pointer,
    "d": convert_int,
    "i": convert_int,
    "u": convert_unsigned,
    "x": convert_hex,
    "X": convert_hex,
    "%": convert_percent,
    "f": convert_float,
    "F": convert_float,
    "e": convert_float,
    "E": convert_float,
    "n": convert_count,
    "o": convert_octal,
    "k": convert_base,
}


def render(fmt: str, args: Iterable) -> OutputBuffer:
    """Format args according to fmt and return the filled buffer.

    Raises FormatError for an invalid format or unsuitable arguments.
    """
    if not isinstance(fmt, str):
        raise FormatError(f"format must be a string, got {fmt!r}")
    arg_iter = iter(args)
    out = OutputBuffer()
    pos = 0
    while pos < len(fmt):
        char = fmt[pos]
        if char == "%":
            spec, pos = parse_spec(fmt, pos + 1, arg_iter)
            _HANDLERS[spec.conversion](arg_iter, spec, out)
        else:
            out.add(char)
            pos += 1
    return out


def vdprintf(fd: int, fmt: str, args: Iterable) -> int:
    """Write formatted output to a file descriptor; return its length."""
    return render(fmt, args).write_to(fd)


def dprintf(fd: int, fmt: str, *args) -> int:
    """Write formatted output to a file descriptor; return its length."""
    return vdprintf(fd, fmt, args)


def vprintf(fmt: str, args: Iterable) -> int:
    """Write formatted output to standard output; return its length."""
    out = render(fmt, args)
    sys.stdout.flush()
    return out.write_to(STDOUT_FD)


def printf(fmt: str, *args) -> int:
    """Write formatted output to standard output; return its length."""
    return vprintf(fmt, args)


def vsnprintf(size: int, fmt: str, args: Iterable) -> tuple[str, int]:
    """Format into at most size - 1 characters.

    Returns the possibly truncated text and the full length of the output.
    """
    out = render(fmt, args)
    return out.truncated(size), len(out)


def snprintf(size: int, fmt: str, *args) -> tuple[str, int]:
    """Format into at most size - 1 characters; see vsnprintf."""
    return vsnprintf(size, fmt, args)


def vsprintf(fmt: str, args: Iterable) -> str:
    """Return the formatted text."""
    return render(fmt, args).to_string()


def sprintf(fmt: str, *args) -> str:
    """Return the formatted text."""
    return vsprintf(fmt, args)


def vasprintf(fmt: str, args: Iterable) -> str:
    """Return the formatted text in a newly made string."""
    return render(fmt, args).to_string()


def asprintf(fmt: str, *args) -> str:
    """Return the formatted text in a newly made string."""
    return vasprintf(fmt, args)