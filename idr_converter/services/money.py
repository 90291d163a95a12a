"""Money / rounding helpers.

Rounding for display lives here only: round half up to two places, applied
to the shortest decimal representation of the float (so 1.005 rounds to
1.01 even though its binary value is slightly below). Conversion values
themselves are never rounded; the API returns them as computed.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP, localcontext

CENT = Decimal("0.01")


def quantize2(value: float) -> Decimal:
    # large enough for any finite float written out in full
    with localcontext() as ctx:
        ctx.prec = 400
        return Decimal(repr(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def format2(value: float) -> str:
    return f"{quantize2(value):f}"
