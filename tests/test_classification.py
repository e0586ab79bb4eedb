"""
Tests for the Classification Primitives
"""

import pytest

from core.classification import (
    Bin,
    UniqueVal,
    breaks_to_classification,
    classify_val,
    create_unique_val_mapping,
    format_classification,
    to_float_list,
    unique_to_normal_breaks,
)


class TestUniqueValMapping:
    def test_runs(self):
        mapping = create_unique_val_mapping([0, 0, 2, 4, 4, 4])
        assert mapping == [
            UniqueVal(val=0.0, first=0, last=1),
            UniqueVal(val=2.0, first=2, last=2),
            UniqueVal(val=4.0, first=3, last=5),
        ]

    def test_empty(self):
        assert create_unique_val_mapping([]) == []

    def test_unsorted_rejected(self):
        with pytest.raises(ValueError):
            create_unique_val_mapping([3, 1, 2])

    def test_unique_to_normal_breaks(self):
        mapping = create_unique_val_mapping([0, 0, 2, 4, 4, 4])
        assert unique_to_normal_breaks([1, 2], mapping) == [2, 3]
        assert unique_to_normal_breaks([], mapping) == []


class TestBreaksToClassification:
    def test_worked_example(self):
        result = breaks_to_classification([2.0, 5.0], [1.0, 2.0, 4.0, 5.0, 7.0, 8.0])
        assert result == [
            Bin(bin_start=1.0, bin_end=2.0, count=1),
            Bin(bin_start=2.0, bin_end=5.0, count=2),
            Bin(bin_start=5.0, bin_end=8.0, count=3),
        ]

    def test_unsorted_data_and_int_input(self):
        result = breaks_to_classification([2, 5], [8, 1, 5, 2, 7, 4])
        assert [b.count for b in result] == [1, 2, 3]

    def test_repeated_maximum_is_counted(self):
        result = breaks_to_classification([2.0], [1, 2, 3, 3, 3])
        assert result == [Bin(1.0, 2.0, 1), Bin(2.0, 3.0, 4)]

    def test_no_breaks_single_bin(self):
        assert breaks_to_classification([], [3, 1, 2]) == [Bin(1.0, 3.0, 3)]

    def test_all_identical(self):
        assert breaks_to_classification([], [0, 0, 0]) == [Bin(0.0, 0.0, 3)]

    def test_counts_sum_to_length(self):
        data = [0, 1, 1, 2, 3, 5, 8, 13, 21]
        result = breaks_to_classification([2, 5, 13], data)
        assert len(result) == 4
        assert sum(b.count for b in result) == len(data)

    def test_empty_data_rejected(self):
        with pytest.raises(ValueError):
            breaks_to_classification([], [])

    def test_break_outside_range_rejected(self):
        with pytest.raises(ValueError):
            breaks_to_classification([10.0], [1, 2, 3])

    def test_descending_breaks_rejected(self):
        with pytest.raises(ValueError):
            breaks_to_classification([5.0, 2.0], [1, 2, 4, 5, 7, 8])


class TestClassifyVal:
    def setup_method(self):
        self.class_ = [Bin(0.0, 1.0, 5), Bin(1.0, 2.0, 5), Bin(2.0, 3.0, 5)]

    def test_half_open_bins(self):
        assert classify_val(0.0, self.class_) == 0
        assert classify_val(1.0, self.class_) == 1
        assert classify_val(1.5, self.class_) == 1

    def test_last_bin_closed(self):
        assert classify_val(3.0, self.class_) == 2

    def test_outside_range(self):
        assert classify_val(3.5, self.class_) is None
        assert classify_val(-0.1, self.class_) is None

    def test_empty_classification(self):
        assert classify_val(1.0, []) is None

    def test_every_point_contained(self):
        data = [1, 2, 4, 5, 7, 8]
        result = breaks_to_classification([2, 5], data)
        for x in data:
            idx = classify_val(x, result)
            assert idx is not None
            b = result[idx]
            if idx == len(result) - 1:
                assert b.bin_start <= x <= b.bin_end
            else:
                assert b.bin_start <= x < b.bin_end

    def test_degenerate_bin(self):
        assert classify_val(0, [Bin(0.0, 0.0, 3)]) == 0


class TestFormatting:
    def test_bin_str(self):
        assert str(Bin(1.0, 2.0, 1)) == "start:1.0 end:2.0 count:1"

    def test_format_classification(self):
        text = format_classification([Bin(1.0, 2.0, 1), Bin(2.0, 5.0, 2)])
        assert text == '["start:1.0 end:2.0 count:1", "start:2.0 end:5.0 count:2"]'

    def test_to_float_list(self):
        assert to_float_list([1, 2]) == [1.0, 2.0]
