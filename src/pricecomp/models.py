"""
Data models for manat price extraction and comparison.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True, slots=True)
class SearchItem:
    """
    Single entry from a search provider response.

    Attributes:
        title: Result title
        link: Result URL
        price_text: Structured price field (shopping results only)
        snippet: Free text snippet (organic results only)
    """

    title: str
    link: str
    price_text: Optional[str] = None
    snippet: Optional[str] = None

    def has_price_text(self) -> bool:
        """Check if the item carries a non-blank structured price."""
        return self.price_text is not None and len(self.price_text.strip()) > 0

    def to_candidate(self) -> PriceCandidate:
        """Pick the text the extractor should look at for this item."""
        if self.has_price_text():
            return PriceCandidate(raw_text=self.price_text, source_url=self.link)
        return PriceCandidate(
            raw_text=f"{self.title} {self.snippet or ''}",
            source_url=self.link,
        )


@dataclass(frozen=True, slots=True)
class PriceCandidate:
    """Text blob to extract a price from, plus where it came from."""

    raw_text: str
    source_url: str


@dataclass(frozen=True, slots=True)
class ExtractedPrice:
    """
    Plausible manat amount found in a piece of text.

    Attributes:
        amount: Exact decimal amount
        currency_confirmed: True when a currency marker was matched
        rule: Name of the pattern rule that produced the match
    """

    amount: Decimal
    currency_confirmed: bool = True
    rule: Optional[str] = None


@dataclass(frozen=True, slots=True)
class PriceResult:
    """Priced offer returned to the caller."""

    url: str
    title: str
    price: Decimal
    store: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "url": self.url,
            "title": self.title,
            "price": str(self.price),
            "store": self.store,
        }
