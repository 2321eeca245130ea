"""
Text cleaning helpers for search result fields.
"""
import re
from typing import Any, Optional


def normalize_whitespace(text: str) -> str:
    """
    Normalize whitespace in text.

    Examples:
        >>> normalize_whitespace("hello    world\\n\\ntest")
        'hello world test'
    """
    if not text:
        return ""

    return re.sub(r'\s+', ' ', text).strip()


def as_text(value: Any) -> Optional[str]:
    """
    Coerce a JSON field to text.

    Numbers are kept (a provider may send ``"price": 799.99``); containers and
    None become None.
    """
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    return str(value)
