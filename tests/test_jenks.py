"""
Tests for the Jenks Natural-Breaks Classifier
"""

import pytest

from core.classification import Bin, create_unique_val_mapping
from core.jenks import (
    BinCountError,
    best_jenks_classification,
    get_jenks_classification,
    jenks_unique_breaks,
    max_bin_std_deviation,
)


class TestJenksClassification:
    def test_two_clear_groups(self):
        result = get_jenks_classification(2, [1, 2, 3, 10, 11, 12])
        assert result == [Bin(1.0, 10.0, 3), Bin(10.0, 12.0, 3)]

    def test_three_clear_groups_unsorted(self):
        data = [21, 1, 11, 3, 22, 2, 10, 12, 20]
        result = get_jenks_classification(3, data)
        assert result == [Bin(1.0, 10.0, 3), Bin(10.0, 20.0, 3), Bin(20.0, 22.0, 3)]

    def test_one_bin_spans_data(self):
        assert get_jenks_classification(1, [4, 0, 2]) == [Bin(0.0, 4.0, 3)]

    def test_duplicates_stay_together(self):
        assert get_jenks_classification(2, [5, 5, 5, 5, 9]) == [Bin(5.0, 9.0, 4), Bin(9.0, 9.0, 1)]
        assert get_jenks_classification(2, [1, 1, 1, 2, 2, 2]) == [Bin(1.0, 2.0, 3), Bin(2.0, 2.0, 3)]

    def test_bins_are_non_empty_and_sum(self):
        data = [0, 0, 1, 3, 3, 4, 7, 8, 8, 8, 12]
        for k in range(1, len(create_unique_val_mapping(sorted(data))) + 1):
            result = get_jenks_classification(k, data)
            assert len(result) == k
            assert all(b.count > 0 for b in result)
            assert sum(b.count for b in result) == len(data)

    def test_single_unique_value(self):
        assert get_jenks_classification(1, [0, 0, 0]) == [Bin(0.0, 0.0, 3)]

    def test_bin_count_above_distinct_rejected(self):
        with pytest.raises(BinCountError):
            get_jenks_classification(3, [0, 0, 1])

    def test_bin_count_below_one_rejected(self):
        with pytest.raises(BinCountError):
            get_jenks_classification(0, [1, 2, 3])

    def test_empty_data_rejected(self):
        with pytest.raises(ValueError):
            get_jenks_classification(1, [])

    def test_unique_breaks(self):
        mapping = create_unique_val_mapping([1, 2, 3, 10, 11, 12])
        assert jenks_unique_breaks(mapping, 1) == []
        assert jenks_unique_breaks(mapping, 2) == [3]


class TestMaxBinStdDeviation:
    def test_two_groups(self):
        data = [1, 2, 3, 10, 11, 12]
        result = get_jenks_classification(2, data)
        assert max_bin_std_deviation(data, result) == pytest.approx((2 / 3) ** 0.5)

    def test_uses_each_bin_slice(self):
        data = [0, 10, 10, 11, 30]
        result = [Bin(0.0, 10.0, 1), Bin(10.0, 30.0, 3), Bin(30.0, 30.0, 1)]
        expected = max_bin_std_deviation([10, 10, 11], [Bin(10.0, 11.0, 3)])
        assert max_bin_std_deviation(data, result) == pytest.approx(expected)
        assert expected > 0


class TestBestJenksClassification:
    def test_identical_distances_choose_one_bin(self):
        for max_bins in (1, 2, 5, 9):
            n, result = best_jenks_classification([0, 0, 0], max_bins)
            assert n == 1
            assert result == [Bin(0.0, 0.0, 3)]
            assert max_bin_std_deviation([0, 0, 0], result) == 0.0

    def test_worked_example(self):
        n, result = best_jenks_classification([0, 2, 4], 9)
        assert n == 3
        assert result == [Bin(0.0, 2.0, 1), Bin(2.0, 4.0, 1), Bin(4.0, 4.0, 1)]

    def test_limited_max_bins(self):
        n, result = best_jenks_classification([0, 2, 4], 2)
        assert n == 2
        assert result == [Bin(0.0, 2.0, 1), Bin(2.0, 4.0, 2)]

    def test_ties_keep_smallest_k(self):
        # k=2 and k=3 both have a worst bin of std 0.5
        n, result = best_jenks_classification([0, 1, 10, 11], 3)
        assert n == 2
        assert result == [Bin(0.0, 10.0, 2), Bin(10.0, 11.0, 2)]

    def test_candidates_stop_at_distinct_count(self):
        n, _ = best_jenks_classification([1, 1, 1, 9, 9, 9], 5)
        assert n == 2

    def test_empty_is_absent(self):
        assert best_jenks_classification([], 3) is None

    def test_max_bins_below_one_rejected(self):
        with pytest.raises(BinCountError):
            best_jenks_classification([1, 2, 3], 0)
