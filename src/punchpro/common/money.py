from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")


def round2(value: float) -> float:
    """Round to 2 decimals, half-up on the exact binary value of ``value``.

    ``Decimal(float)`` keeps the full binary expansion, so 1.005 (really
    1.00499999...) rounds down, as "%.2f"-style fixed formatting does.
    """
    return float(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP))
