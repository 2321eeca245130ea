"""
Plausibility bounds for extracted amounts.
"""
from decimal import Decimal

from .settings import MAX_PRICE, MIN_PRICE


def is_plausible(
    amount: Decimal,
    min_price: Decimal = MIN_PRICE,
    max_price: Decimal = MAX_PRICE,
) -> bool:
    """
    Check that an amount looks like a real price.

    Filters out quantities, percentages and IDs that happened to sit next to
    a currency marker. Bounds are inclusive.
    """
    return min_price <= amount <= max_price
