import pytest

from state_law_guidance.models.laws import Importance, LawCategory
from state_law_guidance.services.diff_engine import DiffEngine, values_differ


def _titles(differences):
    return [d.law_title for d in differences]


class TestDiffSmallCatalog:
    def setup_method(self):
        self.expected_forward = [
            "Wage Floor",
            "Deposit Cap",
            "Notice Period",
            "Texting",
            "Sales Tax",
        ]

    def test_ranked_order_and_tie_break(self, small_catalog):
        engine = DiffEngine(small_catalog)
        assert _titles(engine.diff("NT", "ST")) == self.expected_forward

    def test_importance_is_max_of_both_sides(self, small_catalog):
        engine = DiffEngine(small_catalog)
        by_title = {d.law_title: d for d in engine.diff("NT", "ST")}
        # NT says HIGH, ST says MEDIUM
        assert by_title["Deposit Cap"].importance == Importance.HIGH
        # NT says MEDIUM, ST says HIGH
        assert by_title["Notice Period"].importance == Importance.HIGH
        assert by_title["Sales Tax"].importance == Importance.MEDIUM

    def test_difference_fields(self, small_catalog):
        engine = DiffEngine(small_catalog)
        wage = engine.diff("NT", "ST")[0]
        assert wage.category == LawCategory.EMPLOYMENT
        assert wage.from_jurisdiction == "NT"
        assert wage.to_jurisdiction == "ST"
        assert wage.from_value == "$15.00/hour"
        assert wage.to_value == "$7.25/hour"
        assert wage.description == "Wage Floor rule"
        assert wage.summary_text == "Wage Floor: NT: $15.00/hour → ST: $7.25/hour"

    def test_unmatched_and_equal_titles_are_skipped(self, small_catalog):
        engine = DiffEngine(small_catalog)
        titles = set(_titles(engine.diff("NT", "ST"))) | set(_titles(engine.diff("ST", "NT")))
        assert "Pet Fees" not in titles
        assert "Lane Splitting" not in titles
        assert "Seatbelt" not in titles

    def test_reverse_direction_uses_from_side_order_for_ties(self, small_catalog):
        engine = DiffEngine(small_catalog)
        assert _titles(engine.diff("ST", "NT")) == [
            "Wage Floor",
            "Notice Period",
            "Deposit Cap",
            "Texting",
            "Sales Tax",
        ]

    def test_category_filter_iterates_in_canonical_order(self, small_catalog):
        engine = DiffEngine(small_catalog)
        diffs = engine.diff("NT", "ST", categories=[LawCategory.TAXES, LawCategory.TENANT_RIGHTS])
        assert _titles(diffs) == ["Deposit Cap", "Notice Period", "Sales Tax"]

    def test_category_filter_accepts_names(self, small_catalog):
        engine = DiffEngine(small_catalog)
        assert _titles(engine.diff("NT", "ST", categories=["TAXES"])) == ["Sales Tax"]

    def test_unknown_category_is_rejected(self, small_catalog):
        engine = DiffEngine(small_catalog)
        with pytest.raises(ValueError):
            engine.diff("NT", "ST", categories=["PARKING"])

    def test_unknown_code_yields_nothing(self, small_catalog):
        engine = DiffEngine(small_catalog)
        assert engine.diff("NT", "ZZ") == []
        assert engine.diff("ZZ", "NT") == []
        assert engine.critical_differences("ZZ", "NT") == []

    @pytest.mark.parametrize(
        "limit,expected",
        [
            (3, ["Wage Floor", "Deposit Cap", "Notice Period"]),
            (1, ["Wage Floor"]),
            (10, ["Wage Floor", "Deposit Cap", "Notice Period"]),
            (0, []),
            (-2, []),
        ],
    )
    def test_critical_differences_limit(self, small_catalog, limit, expected):
        engine = DiffEngine(small_catalog)
        assert _titles(engine.critical_differences("NT", "ST", limit=limit)) == expected


def test_values_differ_is_exact():
    assert values_differ("$16.00/hour", "$16/hr")
    assert values_differ("30 days", "30 Days")
    assert values_differ("30 days", "30 days ")
    assert not values_differ("30 days", "30 days")


# Properties over the bundled catalog


@pytest.mark.parametrize("a,b", [("CA", "TX"), ("CA", "WI"), ("NY", "FL"), ("WI", "IL")])
def test_diff_symmetry(engine, a, b):
    forward = {(d.category, d.law_title): d for d in engine.diff(a, b)}
    backward = {(d.category, d.law_title): d for d in engine.diff(b, a)}
    assert forward.keys() == backward.keys()
    for key, d in forward.items():
        reverse = backward[key]
        assert d.importance == reverse.importance
        assert (d.from_value, d.to_value) == (reverse.to_value, reverse.from_value)


def test_diff_is_idempotent(engine):
    assert engine.diff("CA", "TX") == engine.diff("CA", "TX")


@pytest.mark.parametrize("code", ["CA", "TX", "WI", "NY"])
def test_no_self_difference(engine, code):
    assert engine.diff(code, code) == []


@pytest.mark.parametrize("a,b", [("CA", "TX"), ("TX", "CA"), ("CA", "WI"), ("WI", "CA")])
def test_ranking_is_non_increasing(engine, a, b):
    importances = [d.importance for d in engine.diff(a, b)]
    assert importances == sorted(importances, reverse=True)


def test_critical_differences_is_prefix_of_notable(engine):
    notable = [d for d in engine.diff("CA", "TX") if d.importance >= Importance.HIGH]
    critical = engine.critical_differences("CA", "TX", limit=3)
    assert critical == notable[:3]
    assert len(critical) <= 3


def test_ca_to_tx_minimum_wage(engine):
    diffs = engine.diff("CA", "TX", categories=[LawCategory.EMPLOYMENT])
    wage = next(d for d in diffs if d.law_title == "Minimum Wage")
    assert wage.from_value == "$16.00/hour"
    assert wage.to_value == "$7.25/hour"
    assert wage.importance == Importance.CRITICAL


def test_ca_to_tx_ranking(engine):
    diffs = engine.diff("CA", "TX")
    assert _titles(diffs[:3]) == ["Rent Control", "Minimum Wage", "State Income Tax"]
    # CA rates State Income Tax HIGH, TX rates it CRITICAL
    assert diffs[2].importance == Importance.CRITICAL


def test_ca_to_wi_has_critical_differences(engine):
    critical = engine.critical_differences("CA", "WI", limit=3)
    assert len(critical) == 3
    assert all(d.importance >= Importance.HIGH for d in critical)
    assert "Minimum Wage" in _titles(critical)
