"""
Search provider access and response parsing.
"""
from .serper_client import SearchError, SerperClient
from .result_parser import parse_organic_items, parse_shopping_items

__all__ = ["SearchError", "SerperClient", "parse_organic_items", "parse_shopping_items"]
