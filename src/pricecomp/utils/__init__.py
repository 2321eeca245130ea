"""
Utility modules for pricecomp.
"""
from .urls import UNKNOWN_STORE, extract_store_name
from .text_cleaning import as_text, normalize_whitespace

__all__ = [
    "UNKNOWN_STORE",
    "extract_store_name",
    "as_text",
    "normalize_whitespace",
]
