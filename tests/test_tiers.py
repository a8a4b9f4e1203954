"""
Unit Tests for tier discovery and selection

Run with: pytest tests/test_tiers.py -v
"""

import pytest

from tariffs.errors import NoTierColumns
from tariffs.models import TIER_METHODS, Tier
from tariffs.tiers import clamp_tons, parse_tiers, select_tier

TIERS = [Tier(1, "1 ton"), Tier(5, "5 ton"), Tier(10, "10 ton"), Tier(13, "13 ton"), Tier(24, "24 ton")]


# =============================================================================
# DISCOVERY
# =============================================================================

class TestParseTiers:

    def test_header_variants(self):
        headers = [
            "Postcode", "24  t", "1 ton", "2t", "3 Tonnes", "4 TON", "10 tons", "100 ton",
        ]
        tiers = parse_tiers(headers)
        assert [t.tons for t in tiers] == [1, 2, 3, 4, 10, 24, 100]
        assert tiers[0].column == "1 ton"
        assert tiers[-2].column == "24  t"

    @pytest.mark.parametrize("header", [
        "Postcode", "Price 2024", "1000 ton", "5 tx", "Ton 6", "Region",
    ])
    def test_non_tier_headers(self, header):
        assert parse_tiers([header]) == []

    def test_non_string_headers(self):
        assert parse_tiers([1, "2 ton"]) == [Tier(2, "2 ton")]

    def test_duplicate_tonnage_keeps_header_order(self):
        tiers = parse_tiers(["5 ton", "5 t", "1 t"])
        assert [t.column for t in tiers] == ["1 t", "5 ton", "5 t"]


# =============================================================================
# SELECTION
# =============================================================================

class TestSelectTier:

    @pytest.mark.parametrize("method, expected", [
        ("ceil", "13 ton"),
        ("floor", "10 ton"),
        ("nearest", "13 ton"),
    ])
    def test_single_tier_methods(self, method, expected):
        selection = select_tier(TIERS, 12.5, method)
        assert selection.lower.column == expected
        assert selection.upper == selection.lower
        assert not selection.is_interpolated
        assert selection.label == expected

    def test_default_method_is_ceil(self):
        assert select_tier(TIERS, 8.2).lower.column == "10 ton"

    def test_ceil_exact_tier(self):
        assert select_tier(TIERS, 10, "ceil").lower.tons == 10

    def test_nearest_tie_picks_lower(self):
        """7.5 is equally far from 5 and 10."""
        assert select_tier(TIERS, 7.5, "nearest").lower.tons == 5

    def test_interp_between_tiers(self):
        selection = select_tier(TIERS, 12.5, "interp")
        assert selection.is_interpolated
        assert (selection.lower.tons, selection.upper.tons) == (10, 13)
        assert selection.fraction == pytest.approx(2.5 / 3)
        assert selection.label == "10–13 (interp)"

    def test_interp_on_tier_is_single_point(self):
        selection = select_tier(TIERS, 13, "interp")
        assert not selection.is_interpolated
        assert selection.lower.column == "13 ton"
        assert selection.fraction == 0.0

    @pytest.mark.parametrize("method", ["ceil", "floor", "nearest", "interp"])
    def test_below_range_resolves_to_minimum(self, method):
        selection = select_tier(TIERS, 0.3, method)
        assert selection.tons == 1
        assert selection.lower.tons == 1
        assert selection.upper.tons == 1

    @pytest.mark.parametrize("method", TIER_METHODS)
    def test_above_range_resolves_to_maximum(self, method):
        selection = select_tier(TIERS, 40, method)
        assert selection.tons == 24
        assert selection.lower.tons == 24
        assert selection.upper.tons == 24

    def test_floor_never_above_ceil(self):
        t = 1.0
        while t <= 24:
            floor = select_tier(TIERS, t, "floor").lower.tons
            ceil = select_tier(TIERS, t, "ceil").lower.tons
            assert floor <= t <= ceil
            t += 0.25

    def test_single_tier_table(self):
        only = [Tier(3, "3 ton")]
        for method in TIER_METHODS:
            assert select_tier(only, 7, method).lower.column == "3 ton"

    def test_no_tiers(self):
        with pytest.raises(NoTierColumns):
            select_tier([], 5)

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            select_tier(TIERS, 5, "median")

    def test_clamp(self):
        assert clamp_tons(TIERS, 0.5) == 1
        assert clamp_tons(TIERS, 12.5) == 12.5
        assert clamp_tons(TIERS, 99) == 24
