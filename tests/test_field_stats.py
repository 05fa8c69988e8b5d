# ==============================================
# Tests for FieldStats
# ==============================================

import pytest

from settings_guessr.analysis import FieldStats


class TestDeduplication:
    """Identical values collapse into one ObservedValue."""

    def test_counts_accumulate(self):
        stats = FieldStats(name="word")
        stats.push("hello")
        stats.push("hello")
        stats.push("world")

        assert len(stats) == 2
        assert stats.total == 3
        assert sorted(o.count for o in stats) == [1, 2]

    def test_structural_equality(self):
        stats = FieldStats(name="mixed")
        for value in (1, 1.0, True, "1", 1):
            stats.push(value)

        assert len(stats) == 4
        assert stats.total == 5

    def test_arrays_compared_by_content(self):
        stats = FieldStats(name="tags")
        stats.push(["a", "b"])
        stats.push(["a", "b"])
        stats.push(["b", "a"])

        assert len(stats) == 2

    def test_entropy_set_on_first_insertion(self):
        stats = FieldStats(name="word")
        first = stats.push("ab")
        again = stats.push("ab")

        assert first is again
        assert again.entropy == pytest.approx(1.0)
        assert again.count == 2

    def test_empty_stats(self):
        stats = FieldStats(name="nothing")
        assert stats.total == 0
        assert stats.intra_entropy == 0.0
        assert stats.dist_entropy == 0.0
        assert stats.concat_entropy == 0.0


class TestAggregates:
    """Field-level entropy aggregates."""

    def test_string_frequencies_count_distinct_occurrences(self):
        stats = FieldStats(name="f")
        stats.push("a")
        stats.push("a")  # same observed value, not a new occurrence
        stats.push(["a", "b"])
        stats.push("b")

        assert stats.string_frequencies == {"a": 2, "b": 2}
        assert stats.dist_entropy == pytest.approx(1.0)

    def test_intra_entropy_ignores_zero_entropy_values(self):
        stats = FieldStats(name="f")
        stats.push("ab")
        stats.push("abcd")
        stats.push(5)
        stats.push("zzz")

        assert stats.intra_entropy == pytest.approx(1.5)

    def test_concat_entropy_uses_distinct_strings(self):
        stats = FieldStats(name="f")
        stats.push("ab")
        stats.push("ab")
        stats.push(["cd"])

        # "abcd"
        assert stats.concat_entropy == pytest.approx(2.0)
