from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")


def round2(value: float) -> float:
    """Round half-up to 2 decimals on the value's shortest decimal repr.

    ``round()`` works on the binary float and rounds half-to-even, which
    makes values like 2.675 come out as 2.67; payroll output must not
    depend on that.
    """
    return float(Decimal(repr(float(value))).quantize(_CENT, rounding=ROUND_HALF_UP))


def format2(value: float) -> str:
    return f"{round2(value):.2f}"
