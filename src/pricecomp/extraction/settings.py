"""
Immutable settings for the price extraction engine.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Tuple

from ..config import Config, parse_price_setting
from .patterns import PriceRule, patterns_in_priority_order

MIN_PRICE = Decimal("1")
MAX_PRICE = Decimal("100000")
MAX_RESULTS = 5


@dataclass(frozen=True)
class ExtractionSettings:
    """
    Configuration passed to the extractor and ranker at construction.

    Attributes:
        rules: Pattern catalog, highest priority first
        min_price: Smallest plausible amount (inclusive)
        max_price: Largest plausible amount (inclusive)
        max_results: Number of cheapest results to keep
    """

    rules: Tuple[PriceRule, ...] = field(default_factory=patterns_in_priority_order)
    min_price: Decimal = MIN_PRICE
    max_price: Decimal = MAX_PRICE
    max_results: int = MAX_RESULTS

    def __post_init__(self) -> None:
        if self.min_price > self.max_price:
            raise ValueError(
                f"min_price {self.min_price} is greater than max_price {self.max_price}"
            )
        if self.max_results < 0:
            raise ValueError(f"max_results must not be negative, got {self.max_results}")

    @classmethod
    def default(cls) -> ExtractionSettings:
        """Create default settings."""
        return cls()

    @classmethod
    def from_config(cls) -> ExtractionSettings:
        """Create settings from environment-backed Config values.

        Raises:
            ValueError: if PRICE_MIN or PRICE_MAX is not a number, or the
                bounds are inverted
        """
        return cls(
            min_price=parse_price_setting("PRICE_MIN", Config.PRICE_MIN),
            max_price=parse_price_setting("PRICE_MAX", Config.PRICE_MAX),
            max_results=Config.RESULT_LIMIT,
        )
