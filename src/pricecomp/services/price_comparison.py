"""
High-level service that turns a product name into the cheapest manat offers.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from ..config import Config
from ..extraction.engine import PriceExtractor
from ..extraction.settings import ExtractionSettings
from ..logger import get_logger
from ..models import PriceResult, SearchItem
from ..search.result_parser import parse_organic_items, parse_shopping_items
from ..search.serper_client import SerperClient
from ..utils.urls import extract_store_name
from .ranking import rank_cheapest

logger = get_logger(__name__)


class PriceComparisonService:
    """
    Search, extract, rank.

    Shopping results (structured price field) are used first; organic results
    (title + snippet) are only parsed when no shopping result has a price.
    """

    def __init__(
        self,
        client: Optional[SerperClient] = None,
        settings: Optional[ExtractionSettings] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        self.client = client or SerperClient()
        self.settings = settings or ExtractionSettings.from_config()
        self.extractor = PriceExtractor(self.settings)
        self.max_workers = max_workers or Config.EXTRACTION_WORKERS

    def execute(self, product_name: str) -> List[PriceResult]:
        """
        Search for a product and return its cheapest offers.

        Raises:
            SearchError: if the search provider call fails
        """
        logger.info(f"Searching for: {product_name}")
        payload = self.client.search(product_name)
        return self.compare_payload(payload)

    def compare_payload(self, payload: Mapping[str, Any]) -> List[PriceResult]:
        """Build ranked results from an already fetched provider envelope."""
        results = self.build_results(parse_shopping_items(payload))

        if not results:
            logger.info("No shopping results, parsing organic results")
            results = self.build_results(parse_organic_items(payload))

        cheapest = rank_cheapest(results, self.settings.max_results)
        logger.info(f"Found {len(results)} total results, returning {len(cheapest)} cheapest")
        return cheapest

    def compare(self, items: Iterable[SearchItem]) -> List[PriceResult]:
        """Extract prices for ``items`` and return the cheapest ones."""
        return rank_cheapest(self.build_results(items), self.settings.max_results)

    def build_results(self, items: Iterable[SearchItem]) -> List[PriceResult]:
        """
        Extract a price for each item and drop the ones without one.

        The output keeps input order whether or not extraction runs on a
        thread pool.
        """
        items = list(items)
        if self.max_workers > 1 and len(items) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                extracted = list(executor.map(self._to_result, items))
        else:
            extracted = [self._to_result(item) for item in items]
        return [result for result in extracted if result is not None]

    def _to_result(self, item: SearchItem) -> Optional[PriceResult]:
        candidate = item.to_candidate()
        price = self.extractor.extract(candidate.raw_text)
        if price is None:
            return None

        store = extract_store_name(candidate.source_url)
        logger.debug(f"Price: {item.title} - {price.amount} ₼ from {store} ({price.rule})")
        return PriceResult(
            url=item.link,
            title=item.title,
            price=price.amount,
            store=store,
        )


def results_to_dicts(results: Sequence[PriceResult]) -> List[Dict[str, Any]]:
    """Convert results to JSON-ready dictionaries."""
    return [result.to_dict() for result in results]
