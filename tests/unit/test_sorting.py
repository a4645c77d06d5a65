"""Unit tests for sort directives."""

from datetime import datetime, timezone

import pytest

from offer_engine.errors import BadRequestError, NotFoundError
from offer_engine.sorting import DEFAULT_SORT, SortDirection, SortDirective, SortField
from tests.factories import fulltime, intern


@pytest.mark.unit
class TestParse:
    def test_descending_compensation(self):
        directive = SortDirective.parse("-totalCompensation")
        assert directive.field is SortField.TOTAL_COMPENSATION
        assert directive.direction is SortDirection.DESC
        assert str(directive) == "-totalCompensation"

    def test_ascending_yoe(self):
        directive = SortDirective.parse("+totalYoe")
        assert directive.field is SortField.TOTAL_YOE
        assert not directive.descending

    def test_default_is_newest_first(self):
        assert SortDirective.parse(None) == DEFAULT_SORT
        assert SortDirective.parse("") == DEFAULT_SORT
        assert DEFAULT_SORT.field is SortField.MONTH_YEAR_RECEIVED
        assert DEFAULT_SORT.descending

    @pytest.mark.parametrize(
        "directive", ["totalYoe", "*totalYoe", "-salary", "-", "x-totalYoe"]
    )
    def test_invalid(self, directive):
        with pytest.raises(BadRequestError):
            SortDirective.parse(directive)

    @pytest.mark.parametrize("directive", ["+totalYoeExtra", "-totalCompensationX", "+monthYearReceived2"])
    def test_unknown_suffix_falls_back_to_default(self, directive):
        assert SortDirective.parse(directive) == DEFAULT_SORT


@pytest.mark.unit
class TestSort:
    def test_descending_compensation(self):
        offers = [fulltime("low", 100), fulltime("high", 200)]
        ordered = SortDirective.parse("-totalCompensation").sort(offers)
        assert [o.id for o in ordered] == ["high", "low"]

    def test_ascending_compensation_mixes_job_types(self):
        offers = [fulltime("ft", 100), intern("in", 50), fulltime("ft2", 75)]
        ordered = SortDirective.parse("+totalCompensation").sort(offers)
        assert [o.id for o in ordered] == ["in", "ft2", "ft"]

    def test_yoe(self):
        offers = [fulltime("a", yoe=3), fulltime("b", yoe=0), fulltime("c", yoe=8)]
        assert [o.id for o in SortDirective.parse("+totalYoe").sort(offers)] == ["b", "a", "c"]
        assert [o.id for o in SortDirective.parse("-totalYoe").sort(offers)] == ["c", "a", "b"]

    def test_received_date_mixes_naive_and_aware(self):
        offers = [
            fulltime("old", received=datetime(2021, 5, 1)),
            fulltime("new", received=datetime(2022, 5, 1, tzinfo=timezone.utc)),
        ]
        assert [o.id for o in SortDirective.parse("+monthYearReceived").sort(offers)] == [
            "old",
            "new",
        ]
        assert [o.id for o in DEFAULT_SORT.sort(offers)] == ["new", "old"]

    def test_ties_keep_incoming_order(self):
        offers = [fulltime("a", 100), fulltime("b", 100), fulltime("c", 100)]
        assert [o.id for o in SortDirective.parse("-totalCompensation").sort(offers)] == [
            "a",
            "b",
            "c",
        ]
        assert [o.id for o in DEFAULT_SORT.sort(offers)] == ["a", "b", "c"]

    def test_missing_compensation_raises(self):
        offers = [fulltime("a", 100), fulltime("b", None)]
        with pytest.raises(NotFoundError, match="Total Compensation or Salary not found"):
            SortDirective.parse("-totalCompensation").sort(offers)

    def test_missing_yoe_raises(self):
        offers = [fulltime("a", yoe=2), fulltime("b", yoe=None)]
        with pytest.raises(NotFoundError, match="years of experience"):
            SortDirective.parse("+totalYoe").sort(offers)

    def test_single_offer_is_never_compared(self):
        offers = [fulltime("a", None)]
        assert SortDirective.parse("-totalCompensation").sort(offers) == offers
