"""
Store name attribution for result URLs.
"""
from urllib.parse import urlparse

UNKNOWN_STORE = "Unknown"


def extract_store_name(url: str) -> str:
    """
    Derive a short store label from a result URL.

    Strips a leading ``www.`` from the host and keeps the first label.

    Args:
        url: Result URL

    Returns:
        Store label, or ``"Unknown"`` when the URL has no usable host

    Examples:
        >>> extract_store_name("https://www.example.com/p/123")
        'example'
        >>> extract_store_name("not a url")
        'Unknown'
    """
    if not url or not isinstance(url, str):
        return UNKNOWN_STORE

    try:
        host = urlparse(url.strip()).hostname
    except ValueError:
        return UNKNOWN_STORE

    if not host:
        return UNKNOWN_STORE

    if host.startswith("www."):
        host = host[len("www."):]

    label = host.split(".")[0]
    return label or UNKNOWN_STORE
