"""
Unit tests for the price pattern catalog.
"""
import re

from pricecomp.extraction.patterns import (
    DEFAULT_RULES,
    MarkerPosition,
    PriceRule,
    build_rule,
    patterns_in_priority_order,
)


def rule_named(name: str) -> PriceRule:
    return next(rule for rule in patterns_in_priority_order() if rule.name == name)


class TestCatalogOrder:
    """Tests for rule ordering."""

    def test_priority_order(self):
        names = [rule.name for rule in patterns_in_priority_order()]
        assert names == [
            "decimal_before_sign",
            "decimal_after_sign",
            "amount_before_azn",
            "amount_after_azn",
            "amount_before_manat",
            "integer_before_sign",
            "integer_after_sign",
        ]

    def test_catalog_is_immutable_tuple(self):
        assert isinstance(patterns_in_priority_order(), tuple)
        assert patterns_in_priority_order() is DEFAULT_RULES

    def test_marker_positions(self):
        positions = [rule.position for rule in patterns_in_priority_order()]
        assert positions == [
            MarkerPosition.SUFFIX,
            MarkerPosition.PREFIX,
            MarkerPosition.SUFFIX,
            MarkerPosition.PREFIX,
            MarkerPosition.SUFFIX,
            MarkerPosition.SUFFIX,
            MarkerPosition.PREFIX,
        ]


class TestCaptureGrammar:
    """Tests for what each rule captures."""

    def test_decimal_before_sign(self):
        rule = rule_named("decimal_before_sign")
        assert list(rule.find_amounts("Telefon 799,99 ₼")) == ["799,99"]

    def test_decimal_rules_need_two_fraction_digits(self):
        rule = rule_named("decimal_before_sign")
        assert list(rule.find_amounts("Qiymət 450 ₼")) == []

    def test_decimal_after_sign(self):
        rule = rule_named("decimal_after_sign")
        assert list(rule.find_amounts("₼1.234,50")) == ["1.234,50"]

    def test_azn_code_both_cases(self):
        rule = rule_named("amount_before_azn")
        assert list(rule.find_amounts("25 azn, 30 AZN")) == ["25", "30"]

    def test_azn_prefix(self):
        rule = rule_named("amount_after_azn")
        assert list(rule.find_amounts("AZN 1,299.00")) == ["1,299.00"]

    def test_manat_word(self):
        rule = rule_named("amount_before_manat")
        assert list(rule.find_amounts("45 manat və ya 50 Manat")) == ["45", "50"]

    def test_bare_integer_needs_two_digits(self):
        rule = rule_named("integer_before_sign")
        assert list(rule.find_amounts("5 ₼")) == []
        assert list(rule.find_amounts("450₼")) == ["450"]

    def test_integer_after_sign_needs_word_boundary(self):
        rule = rule_named("integer_after_sign")
        assert list(rule.find_amounts("₼1500x")) == []
        assert list(rule.find_amounts("₼ 1500 nağd")) == ["1500"]

    def test_only_ascii_digits(self):
        rule = rule_named("integer_before_sign")
        assert list(rule.find_amounts("١٢٣ ₼")) == []

    def test_matches_are_non_overlapping_left_to_right(self):
        rule = rule_named("decimal_before_sign")
        assert list(rule.find_amounts("0,99 ₼ sonra 149,99 ₼")) == ["0,99", "149,99"]


class TestBuildRule:
    """Tests for compiling custom rules."""

    def test_suffix_rule(self):
        rule = build_rule("usd", r"\$", MarkerPosition.SUFFIX, r"\d+")
        assert rule.pattern.pattern == r"(\d+)\s?\$"
        assert rule.pattern.flags & re.ASCII

    def test_prefix_rule_with_trailing(self):
        rule = build_rule("usd", r"\$", MarkerPosition.PREFIX, r"\d+", trailing=r"\b")
        assert list(rule.find_amounts("$ 12 and $34")) == ["12", "34"]
