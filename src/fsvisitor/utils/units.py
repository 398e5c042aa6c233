from __future__ import annotations

"""
Size Unit Conversion.

Turns raw byte counts into human-scaled labels (B, KB, MB, GB, TB).
"""

from decimal import Decimal, localcontext

from fsvisitor.domain.constants import SIZE_STEP, SIZE_UNITS

# Significant digits kept by the final division, on top of the integer part.
_EXTRA_PRECISION = 10


def bytes_to_string(size: float) -> str:
    """
    Render a byte count with two decimals and the largest fitting unit.

    The unit index is capped at the last entry of SIZE_UNITS, so very
    large inputs are shown as big TB quantities instead of overflowing.
    The unit is chosen with integer division and the value is divided
    once in decimal arithmetic, so integers beyond the float range are
    rendered exactly.

    Args:
        size: Non-negative byte count. Negative values render as '0.00 B'.

    Returns:
        str: Formatted size, e.g. '2.49 MB'.
    """
    if size <= 0:
        return f"{0:.2f} {SIZE_UNITS[0]}"

    whole = int(size)
    exponent = 0
    last_unit = len(SIZE_UNITS) - 1

    while whole >= SIZE_STEP and exponent < last_unit:
        whole //= SIZE_STEP
        exponent += 1

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, whole.bit_length() // 3 + _EXTRA_PRECISION)
        value = Decimal(size) / (Decimal(SIZE_STEP) ** exponent)

    return f"{value:.2f} {SIZE_UNITS[exponent]}"
