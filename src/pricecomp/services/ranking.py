"""
Ranking of priced results.
"""
from __future__ import annotations

from operator import attrgetter
from typing import Callable, Iterable, List, TypeVar

from ..extraction.settings import MAX_RESULTS

T = TypeVar("T")

by_price = attrgetter("price")


def rank_cheapest(
    results: Iterable[T],
    limit: int = MAX_RESULTS,
    key: Callable[[T], object] = by_price,
) -> List[T]:
    """
    Return the ``limit`` cheapest results, cheapest first.

    ``sorted`` is stable, so results with equal prices keep their input order.
    Only results that already carry a price may be passed in.
    """
    if limit <= 0:
        return []
    return sorted(results, key=key)[:limit]
