"""
Parsing of search provider envelopes into SearchItem lists.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..models import SearchItem
from ..utils.text_cleaning import as_text, normalize_whitespace

logger = logging.getLogger(__name__)

SHOPPING_KEY = "shopping"
ORGANIC_KEY = "organic"


def _entries(payload: Mapping[str, Any], key: str) -> List[Dict[str, Any]]:
    entries = payload.get(key)
    if entries is None:
        return []
    if not isinstance(entries, list):
        logger.warning(f"Ignoring '{key}' results: expected a list, got {type(entries).__name__}")
        return []
    return entries


def _to_item(
    entry: Any,
    *,
    price_field: Optional[str] = None,
    snippet_field: Optional[str] = None,
) -> Optional[SearchItem]:
    if not isinstance(entry, dict):
        logger.warning(f"Skipping malformed result entry: {entry!r}")
        return None

    title = as_text(entry.get("title"))
    link = as_text(entry.get("link"))
    if not title or not link:
        logger.warning(f"Skipping result without title or link: {entry.get('title')!r}")
        return None

    return SearchItem(
        title=normalize_whitespace(title),
        link=link.strip(),
        price_text=as_text(entry.get(price_field)) if price_field else None,
        snippet=as_text(entry.get(snippet_field)) if snippet_field else None,
    )


def parse_shopping_items(payload: Mapping[str, Any]) -> List[SearchItem]:
    """Shopping results: the structured ``price`` field is the price source."""
    items: List[SearchItem] = []
    entries = _entries(payload, SHOPPING_KEY)
    for entry in entries:
        item = _to_item(entry, price_field="price")
        if item is not None:
            items.append(item)
    logger.info(f"Found {len(entries)} shopping results ({len(items)} usable)")
    return items


def parse_organic_items(payload: Mapping[str, Any]) -> List[SearchItem]:
    """Organic results: title and snippet are searched for a price."""
    items: List[SearchItem] = []
    entries = _entries(payload, ORGANIC_KEY)
    if not entries:
        logger.warning("No organic results found")
        return items
    for entry in entries:
        item = _to_item(entry, snippet_field="snippet")
        if item is not None:
            items.append(item)
    logger.info(f"Parsing {len(entries)} organic results ({len(items)} usable)")
    return items
