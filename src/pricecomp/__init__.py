"""
pricecomp - cheapest manat offers from search results.

Extracts AZN prices from search result titles, snippets and price fields,
then ranks the cheapest offers.
"""

__version__ = "1.0.0"

from .models import ExtractedPrice, PriceCandidate, PriceResult, SearchItem
from .extraction.engine import PriceExtractor, extract_price
from .services.price_comparison import PriceComparisonService

__all__ = [
    "ExtractedPrice",
    "PriceCandidate",
    "PriceResult",
    "SearchItem",
    "PriceExtractor",
    "extract_price",
    "PriceComparisonService",
]
