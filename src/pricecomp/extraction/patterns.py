"""
Recognition rules for manat prices inside free text.

Each rule pairs a currency marker (``₼``, ``AZN``, ``manat``) placed before or
after a number with a capture grammar for the number itself. Rules are tried
in the order returned by :func:`patterns_in_priority_order`; decimal-bearing
forms come first and the bare-integer ``₼`` forms last, since a bare integer
next to the symbol is the weakest signal.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class MarkerPosition(str, Enum):
    PREFIX = "prefix"
    SUFFIX = "suffix"


# Capture grammars
DECIMAL_AMOUNT = r"\d{1,6}[.,]?\d{0,3}[.,]\d{2}"
LOOSE_AMOUNT = r"\d{1,6}[.,]?\d{0,3}[.,]?\d{0,2}"
BARE_INTEGER = r"\d{2,6}"

# Currency markers
MANAT_SIGN = "₼"
AZN_CODE = r"(?:AZN|azn)"
MANAT_WORD = r"(?:manat|Manat)"


@dataclass(frozen=True, slots=True)
class PriceRule:
    """
    Single recognition rule.

    Attributes:
        name: Short identifier used in logs
        marker: Currency marker regex
        position: Whether the marker precedes or follows the number
        pattern: Compiled regex; group 1 is the numeric substring
    """

    name: str
    marker: str
    position: MarkerPosition
    pattern: re.Pattern

    def find_amounts(self, text: str):
        """Yield captured numeric substrings, leftmost first, non-overlapping."""
        for match in self.pattern.finditer(text):
            yield match.group(1)


def build_rule(
    name: str,
    marker: str,
    position: MarkerPosition,
    amount: str,
    *,
    trailing: Optional[str] = None,
) -> PriceRule:
    """
    Compile a rule from a marker and an amount grammar.

    Matching is ASCII-only so ``\\d``, ``\\s`` and ``\\b`` mean plain digits,
    plain whitespace and ASCII word boundaries.
    """
    if position is MarkerPosition.SUFFIX:
        regex = rf"({amount})\s?{marker}"
    else:
        regex = rf"{marker}\s?({amount})"
    if trailing:
        regex += trailing
    return PriceRule(
        name=name,
        marker=marker,
        position=position,
        pattern=re.compile(regex, re.ASCII),
    )


DEFAULT_RULES: Tuple[PriceRule, ...] = (
    build_rule("decimal_before_sign", MANAT_SIGN, MarkerPosition.SUFFIX, DECIMAL_AMOUNT),
    build_rule("decimal_after_sign", MANAT_SIGN, MarkerPosition.PREFIX, DECIMAL_AMOUNT),
    build_rule("amount_before_azn", AZN_CODE, MarkerPosition.SUFFIX, LOOSE_AMOUNT),
    build_rule("amount_after_azn", AZN_CODE, MarkerPosition.PREFIX, LOOSE_AMOUNT),
    build_rule("amount_before_manat", MANAT_WORD, MarkerPosition.SUFFIX, LOOSE_AMOUNT),
    build_rule("integer_before_sign", MANAT_SIGN, MarkerPosition.SUFFIX, BARE_INTEGER),
    build_rule(
        "integer_after_sign", MANAT_SIGN, MarkerPosition.PREFIX, BARE_INTEGER,
        trailing=r"\b",
    ),
)


def patterns_in_priority_order() -> Tuple[PriceRule, ...]:
    """Return the default rule catalog, highest priority first."""
    return DEFAULT_RULES


__all__ = [
    "MarkerPosition",
    "PriceRule",
    "build_rule",
    "DEFAULT_RULES",
    "patterns_in_priority_order",
]
