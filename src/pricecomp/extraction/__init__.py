"""
Price extraction: pattern catalog, normalization, bounds and the engine.
"""
from .engine import PriceExtractor, extract_price
from .normalizer import NormalizationError, normalize_price
from .patterns import MarkerPosition, PriceRule, patterns_in_priority_order
from .settings import MAX_PRICE, MAX_RESULTS, MIN_PRICE, ExtractionSettings
from .validator import is_plausible

__all__ = [
    "PriceExtractor",
    "extract_price",
    "NormalizationError",
    "normalize_price",
    "MarkerPosition",
    "PriceRule",
    "patterns_in_priority_order",
    "ExtractionSettings",
    "MIN_PRICE",
    "MAX_PRICE",
    "MAX_RESULTS",
    "is_plausible",
]
