"""Two-decimal rounding shared by every derived metric."""

import math
from decimal import ROUND_HALF_UP, Decimal, getcontext, localcontext

CENTS = Decimal("0.01")

Number = Decimal | int | float


def to_decimal(value: Number) -> Decimal:
    """Convert a number to ``Decimal`` without binary float artefacts.

    Floats go through their shortest ``repr`` so that ``1.005`` stays
    ``Decimal("1.005")`` instead of ``1.00499999999999989...``.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round2(value: Number) -> Number:
    """Round to 2 decimal places, ties away from zero.

    Finite input always comes back as a ``Decimal`` quantized to cents,
    whatever its magnitude. NaN and infinities are returned unchanged;
    callers validate upstream.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return value
    dec = to_decimal(value)
    if not dec.is_finite():
        return value
    # room for every integer digit, a carry, and the two cents digits
    with localcontext() as ctx:
        ctx.prec = max(getcontext().prec, dec.adjusted() + 4)
        return dec.quantize(CENTS, rounding=ROUND_HALF_UP)
