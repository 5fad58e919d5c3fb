"""
Wellness ROI - Rounding Helpers
Shared integerisation rules used by every stage of the calculation engine.
Every monetary leaf is rounded up and floored at zero before it is combined.
"""
import math
from decimal import Decimal, ROUND_HALF_UP

ONE_DECIMAL = Decimal('0.1')


def round_up(value):
    """Smallest integer >= max(value, 0)."""
    return max(math.ceil(value), 0)


def round_half_up(value):
    """Nearest integer, ties toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def ratio_display(points):
    """Re-express whole percentage points as a ratio for display.

    704 -> Decimal('7.0'), 700 -> 7, 125 -> Decimal('1.3').
    The tenths digit is rounded half-up on the exact binary value of
    points / 100, never on a re-rounded decimal string.
    """
    ratio = points / 100
    if ratio % 1 == 0:
        return int(ratio)
    return Decimal(ratio).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
