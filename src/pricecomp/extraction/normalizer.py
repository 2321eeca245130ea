"""
Conversion of captured price strings to exact decimals.
"""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

_PLAIN_DECIMAL = re.compile(r"\d+(?:\.\d*)?|\.\d+", re.ASCII)


class NormalizationError(ValueError):
    """Raised when a captured substring is not a usable decimal number."""

    def __init__(self, raw: str, cleaned: str) -> None:
        super().__init__(f"Cannot parse price {raw!r} (cleaned to {cleaned!r})")
        self.raw = raw
        self.cleaned = cleaned


def clean_separators(raw: str) -> str:
    """
    Resolve which of ``.`` and ``,`` is the decimal separator.

    Whichever mark occurs last wins: the other one is treated as thousands
    grouping and dropped.

    Examples:
        >>> clean_separators("1.234,50")
        '1234.50'
        >>> clean_separators("1,234.50")
        '1234.50'
        >>> clean_separators("3,250")
        '3.250'
    """
    text = raw.strip()
    last_comma = text.rfind(",")
    last_dot = text.rfind(".")

    if last_comma > last_dot:
        return text.replace(".", "").replace(",", ".")
    if last_dot > last_comma:
        return text.replace(",", "")
    return text


def normalize_price(raw: str) -> Decimal:
    """
    Convert a raw numeric substring to an exact Decimal.

    Args:
        raw: Captured text such as ``"1.234,50"`` or ``"799,99"``

    Returns:
        Parsed Decimal (no float rounding)

    Raises:
        NormalizationError: if separators remain ambiguous after cleaning
            (e.g. ``"1.234.567,8,9"``) or the text has non-digit characters
    """
    cleaned = clean_separators(raw)
    if not _PLAIN_DECIMAL.fullmatch(cleaned):
        raise NormalizationError(raw, cleaned)
    try:
        return Decimal(cleaned)
    except InvalidOperation as exc:
        raise NormalizationError(raw, cleaned) from exc
