"""
Business logic services for price comparison.

Provides:
- Orchestration of search, extraction and ranking
- Cheapest-first ranking of priced results
"""

from .price_comparison import PriceComparisonService, results_to_dicts
from .ranking import rank_cheapest

__all__ = [
    'PriceComparisonService',
    'results_to_dicts',
    'rank_cheapest',
]
