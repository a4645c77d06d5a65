"""Unit tests for percentile ranking."""

import pytest

from offer_engine.ranking import exclude, percentile, rank, top_slice
from tests.factories import fulltime


def _cohort(size):
    # Highest paid first, as the store returns cohorts.
    return [fulltime(f"o{i}", 1000 - i) for i in range(size)]


@pytest.mark.unit
class TestRank:
    def test_index_of_each_member(self):
        cohort = _cohort(5)
        assert [rank(o, cohort) for o in cohort] == [0, 1, 2, 3, 4]

    def test_absent_offer(self):
        assert rank(fulltime("stranger"), _cohort(3)) == -1
        assert rank(fulltime("stranger"), []) == -1

    def test_matches_by_id(self):
        cohort = _cohort(3)
        same_id = fulltime("o1", 1)
        assert rank(same_id, cohort) == 1


@pytest.mark.unit
class TestPercentile:
    def test_rank_over_size(self):
        cohort = _cohort(4)
        assert [percentile(o, cohort) for o in cohort] == [0, 0.25, 0.5, 0.75]

    def test_highest_paid_is_zero(self):
        cohort = _cohort(7)
        assert percentile(cohort[0], cohort) == 0

    def test_empty_cohort(self):
        assert percentile(fulltime("a"), []) == 0

    def test_single_member(self):
        only = fulltime("a")
        assert percentile(only, [only]) == 0


@pytest.mark.unit
class TestTopSlice:
    def test_empty(self):
        assert top_slice([]) == []

    def test_single(self):
        cohort = _cohort(1)
        assert top_slice(cohort) == cohort

    def test_two(self):
        cohort = _cohort(2)
        assert [o.id for o in top_slice(cohort)] == ["o0", "o1"]

    def test_five(self):
        # floor(5 * 0.9) - 1 = 3
        assert [o.id for o in top_slice(_cohort(5))] == ["o3", "o4"]

    def test_ten(self):
        # floor(10 * 0.9) - 1 = 8
        assert [o.id for o in top_slice(_cohort(10))] == ["o8", "o9"]

    def test_twenty(self):
        # floor(20 * 0.9) - 1 = 17
        assert [o.id for o in top_slice(_cohort(20))] == ["o17", "o18"]

    @pytest.mark.parametrize("size", range(2, 30))
    def test_never_more_than_two(self, size):
        assert 1 <= len(top_slice(_cohort(size))) <= 2


@pytest.mark.unit
def test_exclude_removes_reference_only():
    cohort = _cohort(4)
    rest = exclude(cohort[2], cohort)

    assert [o.id for o in rest] == ["o0", "o1", "o3"]
    assert exclude(fulltime("stranger"), cohort) == cohort
