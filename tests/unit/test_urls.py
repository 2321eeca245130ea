"""
Unit tests for store attribution.
"""
import pytest

from pricecomp.utils.urls import UNKNOWN_STORE, extract_store_name


class TestExtractStoreName:
    """Tests for deriving a store label from a URL."""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://www.example.com/p/123", "example"),
            ("https://kontakt.az/telefonlar/iphone-15", "kontakt"),
            ("https://shop.irshad.az/item", "shop"),
            ("http://example.com:8080/a", "example"),
            ("https://WWW.Example.COM/", "example"),
            ("http://localhost/item", "localhost"),
        ],
    )
    def test_valid_urls(self, url, expected):
        assert extract_store_name(url) == expected

    @pytest.mark.parametrize(
        "url",
        ["not a url", "", "www.example.com/no-scheme", "http://", "http://[::1", None],
    )
    def test_unusable_urls(self, url):
        assert extract_store_name(url) == UNKNOWN_STORE

    def test_sentinel_value(self):
        assert UNKNOWN_STORE == "Unknown"

