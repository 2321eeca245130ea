"""
Price extraction engine.

Runs the pattern catalog over a text blob and returns the first captured
amount that both normalizes cleanly and falls inside the plausibility bounds.
Rules are tried one at a time in priority order; within a rule, matches are
tried left to right. Scanning stops at the first valid value.
"""
from __future__ import annotations

from typing import Optional

from ..logger import get_logger
from ..models import ExtractedPrice
from .normalizer import NormalizationError, normalize_price
from .settings import ExtractionSettings
from .validator import is_plausible

logger = get_logger(__name__)


class PriceExtractor:
    """Extract a single manat amount from free text."""

    def __init__(self, settings: Optional[ExtractionSettings] = None) -> None:
        self.settings = settings or ExtractionSettings.default()

    def extract(self, text: Optional[str]) -> Optional[ExtractedPrice]:
        """
        Find the first plausible price in ``text``.

        Args:
            text: Title, snippet or structured price field

        Returns:
            ExtractedPrice, or None if no rule produced a plausible value
        """
        if not text or not text.strip():
            return None

        for rule in self.settings.rules:
            for raw in rule.find_amounts(text):
                try:
                    amount = normalize_price(raw)
                except NormalizationError:
                    logger.debug(f"Failed to parse price: {raw}")
                    continue

                if is_plausible(amount, self.settings.min_price, self.settings.max_price):
                    return ExtractedPrice(amount=amount, currency_confirmed=True, rule=rule.name)

                logger.debug(f"Rejected implausible amount {amount} ({rule.name})")

        return None


_default_extractor = PriceExtractor()


def extract_price(text: Optional[str]) -> Optional[ExtractedPrice]:
    """Extract a price with the default rules and bounds."""
    return _default_extractor.extract(text)
