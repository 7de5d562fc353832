"""Currency rounding helpers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

OUTPUT_PRECISION = Decimal("0.01")  # 2 decimal places for results


def round_to_cents(amount: Decimal) -> Decimal:
    """Round amount to 2 decimal places (cents), half-up."""
    return amount.quantize(OUTPUT_PRECISION, rounding=ROUND_HALF_UP)
