"""
Pytest configuration and fixtures for pricecomp tests.
"""
import sys
from pathlib import Path

# Add src to path for imports
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

import pytest
from pricecomp.extraction.engine import PriceExtractor
from pricecomp.extraction.settings import ExtractionSettings
from pricecomp.search.serper_client import SearchError
from pricecomp.services.price_comparison import PriceComparisonService


class FakeSearchClient:
    """Stands in for SerperClient; returns a canned envelope."""

    def __init__(self, payload=None, error=None):
        self.payload = payload or {}
        self.error = error
        self.queries = []

    def search(self, product_name):
        self.queries.append(product_name)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def settings():
    """Default extraction settings."""
    return ExtractionSettings.default()


@pytest.fixture
def extractor(settings):
    """Extractor with default rules and bounds."""
    return PriceExtractor(settings)


@pytest.fixture
def sample_payload():
    """Serper-like envelope with shopping and organic results."""
    return {
        "searchParameters": {"q": "iphone 15 qiymət satış al", "gl": "az"},
        "shopping": [
            {
                "title": "Apple iPhone 15 128GB",
                "link": "https://www.kontakt.az/iphone-15-128",
                "price": "1.899,99 ₼",
            },
            {
                "title": "Apple iPhone 15 128GB Black",
                "link": "https://irshad.az/iphone-15",
                "price": "1799 AZN",
            },
            {
                "title": "iPhone 15 case",
                "link": "https://www.example.com/case",
            },
        ],
        "organic": [
            {
                "title": "iPhone 15 - Baku Electronics",
                "link": "https://www.bakuelectronics.az/iphone-15",
                "snippet": "Qiymət: 1.749,00 AZN. Kreditlə al.",
            },
        ],
    }


@pytest.fixture
def organic_payload():
    """Envelope with organic results only."""
    return {
        "organic": [
            {
                "title": "iPhone 15 128GB",
                "link": "https://www.kontakt.az/iphone-15",
                "snippet": "Qiymət: 1.999,00 AZN",
            },
            {
                "title": "iPhone 15 review",
                "link": "https://blog.example.com/review",
                "snippet": "Camera test and battery life, 50 pieces sold",
            },
            {
                "title": "iPhone 15 - 1.849,50 ₼",
                "link": "https://irshad.az/iphone-15",
            },
        ],
    }


@pytest.fixture
def make_service(settings):
    """Factory for a service backed by a FakeSearchClient."""

    def _make(payload=None, error=None, max_workers=1):
        client = FakeSearchClient(payload=payload, error=error)
        return PriceComparisonService(client=client, settings=settings, max_workers=max_workers)

    return _make


@pytest.fixture
def search_error():
    return SearchError("serper", "Serper API error: 503")
