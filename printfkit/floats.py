"""Rendering of floating point conversions (%f, %F, %e, %E).

Digits are produced by repeated scaling and truncation, not by rounding,
so the last printed digit is cut rather than rounded.
"""

from __future__ import annotations

import math
import numbers
from typing import Iterator

from printfkit.buffer import OutputBuffer
from printfkit.spec import INT_MAX, FormatError, Spec

DEFAULT_PRECISION = 6

_DIGITS = "0123456789"


def _digit(value: int) -> str:
    # Scaling error can push a digit just past 9; keep it a valid digit.
    return _DIGITS[min(abs(value), 9)]


def _is_special(nb: float) -> bool:
    return math.isnan(nb) or math.isinf(nb)


def read_float(args: Iterator, spec: Spec) -> float:
    """Take the next argument as a floating point number."""
    try:
        value = next(args)
    except StopIteration:
        raise FormatError("not enough arguments") from None
    if not isinstance(value, numbers.Real):
        raise FormatError(f"expected a number argument, got {value!r}")
    try:
        return float(value)
    except OverflowError:
        raise FormatError(f"number {value!r} out of floating point range") from None


def float_sign_length(nb: float, spec: Spec) -> int:
    """1 if a sign character is printed before nb, else 0."""
    if math.isnan(nb) or nb == math.inf:
        return 0
    if nb < 0:
        return 1
    return 1 if spec.plus or spec.space else 0


def _add_sign(nb: float, spec: Spec, out: OutputBuffer) -> None:
    if math.isnan(nb) or nb == math.inf:
        return
    if nb < 0:
        out.add("-")
    elif spec.plus:
        out.add("+")
    elif spec.space:
        out.add(" ")


def _leading_scale(nb: float) -> float:
    multiplier = 1.0
    tmp = nb
    while tmp >= 10.0 or tmp <= -10.0:
        multiplier *= 10
        tmp /= 10
    return multiplier


def _integer_part(nb: float) -> tuple[str, float]:
    """Digits of the integer part of nb and the remaining fraction."""
    multiplier = _leading_scale(nb)
    chars = []
    while multiplier >= 1.0:
        digit = int(nb / multiplier)
        chars.append(_digit(digit))
        nb -= digit * multiplier
        multiplier /= 10
    return "".join(chars), nb


def _fraction_length(spec: Spec) -> int:
    if not spec.dot:
        return 1 + DEFAULT_PRECISION
    if spec.precision:
        return 1 + spec.precision
    if spec.hash:
        return 1
    return 0


def _checked(length: int, nb: float, spec: Spec) -> int:
    if length < 0 or length > INT_MAX or (
        length == INT_MAX and float_sign_length(nb, spec)
    ):
        raise FormatError("floating point conversion too long")
    return length


def fixed_length(nb: float, spec: Spec) -> int:
    """Length of nb in %f notation, without sign."""
    digits, _ = _integer_part(nb)
    return _checked(len(digits) + _fraction_length(spec), nb, spec)


def _exponent_length(nb: float) -> int:
    """Length of the 'e+NN' part."""
    if nb == 0.0:
        return 4
    exp = 0
    while nb <= -10.0 or nb >= 10.0:
        exp += 1
        nb /= 10
    while -1.0 < nb < 0.0 or 0.0 < nb < 1.0:
        exp += 1
        nb *= 10
    return 2 + max(len(str(exp)), 2)


def exponential_length(nb: float, spec: Spec) -> int:
    """Length of nb in %e notation, without sign."""
    return _checked(1 + _fraction_length(spec) + _exponent_length(nb), nb, spec)


def float_length(nb: float, spec: Spec) -> int:
    """Length of nb as rendered by the spec's conversion, without sign."""
    if _is_special(nb):
        return 3
    if spec.conversion in ("f", "F"):
        return fixed_length(nb, spec)
    if spec.conversion in ("e", "E"):
        return exponential_length(nb, spec)
    return 0


def _wants_fraction(spec: Spec) -> bool:
    return not (spec.dot and spec.precision == 0 and not spec.hash)


def add_decimals(nb: float, spec: Spec, out: OutputBuffer) -> None:
    """Append the fractional digits of nb, truncated to the precision."""
    precision = spec.precision if spec.dot else DEFAULT_PRECISION
    if precision < 0:
        raise FormatError("negative precision")
    for _ in range(precision):
        nb *= 10
        digit = int(nb)
        out.add(_digit(digit))
        nb -= digit


def add_fixed(nb: float, spec: Spec, out: OutputBuffer) -> None:
    """Append nb in %f notation, without sign."""
    digits, fraction = _integer_part(nb)
    out.add_text(digits)
    if _wants_fraction(spec):
        out.add(".")
        add_decimals(fraction, spec, out)


def _normalize(nb: float) -> tuple[float, int]:
    """Scale nb into [1, 10) and return it with its decimal exponent."""
    if nb == 0.0:
        return nb, 0
    exp = 0
    while nb <= -10.0 or nb >= 10.0:
        exp += 1
        nb /= 10
    while -1.0 < nb < 0.0 or 0.0 < nb < 1.0:
        exp -= 1
        nb *= 10
    return nb, exp


def add_exponential(nb: float, spec: Spec, out: OutputBuffer) -> None:
    """Append nb in %e notation, without sign."""
    mantissa, exp = _normalize(nb)
    lead = int(mantissa)
    out.add(_digit(lead))
    mantissa -= lead
    if _wants_fraction(spec):
        out.add(".")
        add_decimals(mantissa, spec, out)
    if spec.conversion in ("e", "E"):
        out.add(spec.conversion)
    out.add("-" if exp < 0 else "+")
    if -10 < exp < 10:
        out.add("0")
    out.add_text(str(abs(exp)))


def _add_special(nb: float, spec: Spec, out: OutputBuffer) -> None:
    word = "nan" if math.isnan(nb) else "inf"
    if spec.conversion in ("f", "e"):
        out.add_text(word)
    elif spec.conversion in ("F", "E"):
        out.add_text(word.upper())


def add_float(nb: float, spec: Spec, out: OutputBuffer) -> None:
    """Append nb, without sign, in the spec's notation."""
    if _is_special(nb):
        _add_special(nb, spec, out)
    elif spec.conversion in ("f", "F"):
        add_fixed(nb, spec, out)
    elif spec.conversion in ("e", "E"):
        add_exponential(nb, spec, out)


def handle_float(nb: float, spec: Spec, out: OutputBuffer) -> None:
    """Render a floating point number with sign and padding."""
    length = float_length(nb, spec)
    sign_len = float_sign_length(nb, spec)
    padding = spec.width - (length + sign_len)
    if spec.minus:
        _add_sign(nb, spec, out)
        add_float(nb, spec, out)
        out.fill(padding, " ")
        return
    if spec.zero:
        _add_sign(nb, spec, out)
        out.fill(padding, "0")
    else:
        out.fill(padding, " ")
        _add_sign(nb, spec, out)
    add_float(nb, spec, out)