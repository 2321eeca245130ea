"""Client for the Serper Google search API."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..config import Config

logger = logging.getLogger(__name__)


class SearchError(RuntimeError):
    """Raised when the search provider cannot complete a request."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message)
        self.source = source
        self.message = message


class SerperClient:
    """Fetches raw search results for a product name."""

    source_name = "serper"

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        country: Optional[str] = None,
        language: Optional[str] = None,
        num_results: Optional[int] = None,
        query_suffix: Optional[str] = None,
        timeout_s: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key or Config.SERPER_API_KEY
        self.api_url = api_url or Config.SERPER_API_URL
        self.country = country or Config.SEARCH_COUNTRY
        self.language = language or Config.SEARCH_LANGUAGE
        self.num_results = num_results or Config.SEARCH_RESULT_COUNT
        self.query_suffix = Config.SEARCH_QUERY_SUFFIX if query_suffix is None else query_suffix
        self.timeout_s = timeout_s or Config.REQUEST_TIMEOUT_S
        self.session = session or requests.Session()

    def build_query(self, product_name: str) -> str:
        """Append the local "price / sale / buy" keywords to the product name."""
        return f"{product_name.strip()} {self.query_suffix}".strip()

    def build_payload(self, product_name: str) -> Dict[str, Any]:
        return {
            "q": self.build_query(product_name),
            "gl": self.country,
            "hl": self.language,
            "num": self.num_results,
        }

    def search(self, product_name: str) -> Dict[str, Any]:
        """
        Run a search and return the decoded JSON envelope.

        Raises:
            SearchError: if the API key is missing, the request fails, the
                provider answers with a non-2xx status or the body is not JSON
        """
        if not self.api_key:
            raise SearchError(self.source_name, "SERPER_API_KEY missing. Provide api_key or set SERPER_API_KEY.")

        payload = self.build_payload(product_name)
        headers = {
            "X-API-KEY": self.api_key,
            "Content-Type": "application/json",
        }
        logger.debug(f"Query: {payload['q']}")

        try:
            response = self.session.post(
                self.api_url,
                json=payload,
                headers=headers,
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            raise SearchError(self.source_name, f"Search request failed: {e}") from e

        if not response.ok:
            raise SearchError(self.source_name, f"Serper API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise SearchError(self.source_name, "Serper API returned a non-JSON body") from e

        if not isinstance(data, dict):
            raise SearchError(self.source_name, "Serper API returned an unexpected payload")

        logger.info(f"Serper response keys for '{payload['q']}': {list(data.keys())}")
        return data
