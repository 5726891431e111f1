"""Number-to-text helpers shared by the converter and the arithmetic evaluator.

Rounding is half-up on the exact binary value of the float, which is what users of the old web
calculator saw. Python's `format()` rounds half-even, so fixed-point output goes through `Decimal`.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

# Enough digits for any finite double plus the requested decimals.
_CONTEXT = Context(prec=400)


def to_fixed(value: float, digits: int) -> str:
    """Format `value` with exactly `digits` decimals (half-up rounding)."""

    quantum = Decimal(1).scaleb(-digits)
    text = format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT), "f")
    if text.startswith("-") and Decimal(text) == 0:
        return text[1:]
    return text


def to_exponential(value: float, digits: int) -> str:
    """Format `value` in scientific notation, e.g. `1.00e-3`.

    The exponent carries an explicit sign and no zero padding.
    """

    mantissa, exponent = f"{value:.{digits}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def strip_zeros(text: str) -> str:
    """Drop trailing fractional zeros and a dangling decimal point (`"1.2500"` -> `"1.25"`)."""

    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def format_integer(value: float) -> str:
    """Format an integral float without a decimal point (`-0.0` prints as `0`)."""

    return str(int(value))
