"""
Classification Primitives

Data structures and helpers shared by the Jenks classifier:

- Bin / Classification: half-open intervals [start, end) with point counts;
  the last bin of a classification is closed on both ends so it holds the
  dataset maximum.
- UniqueVal: a run of identical values in sorted data, with the indices of
  its first and last occurrence. Used to compress repeated distances before
  searching for breaks, and to map breaks back onto the original data.

Usage:
    from core.classification import breaks_to_classification, classify_val

    class_ = breaks_to_classification([2.0, 5.0], [1, 2, 4, 5, 7, 8])
    # [start:1.0 end:2.0 count:1, start:2.0 end:5.0 count:2, start:5.0 end:8.0 count:3]
    classify_val(4.0, class_)  # 1
"""

from typing import List, Optional, Sequence
from dataclasses import dataclass


@dataclass
class UniqueVal:
    """A unique value in sorted data with its first and last index."""
    val: float
    first: int
    last: int


@dataclass
class Bin:
    """
    One bin of a classification.

    Attributes:
        bin_start: Lowest value (inclusive)
        bin_end: Highest value (exclusive, except for the last bin)
        count: Number of data points in the bin
    """
    bin_start: float
    bin_end: float
    count: int = 0

    def __str__(self):
        return f"start:{self.bin_start} end:{self.bin_end} count:{self.count}"


Classification = List[Bin]


def to_float_list(data: Sequence) -> List[float]:
    """Convert any numeric sequence (ints, numpy scalars, ...) to floats."""
    return [float(item) for item in data]


def create_unique_val_mapping(vals: Sequence[float]) -> List[UniqueVal]:
    """
    Compress sorted data into runs of identical values.

    Args:
        vals: Data sorted ascending

    Returns:
        One UniqueVal per distinct value, in ascending order

    Example:
        >>> create_unique_val_mapping([0, 0, 2, 4, 4, 4])
        [UniqueVal(val=0.0, first=0, last=1), UniqueVal(val=2.0, first=2, last=2),
         UniqueVal(val=4.0, first=3, last=5)]
    """
    unique_vals: List[UniqueVal] = []
    for i, item in enumerate(to_float_list(vals)):
        if not unique_vals:
            unique_vals.append(UniqueVal(val=item, first=i, last=i))
        elif unique_vals[-1].val == item:
            unique_vals[-1].last = i
        else:
            if item < unique_vals[-1].val:
                raise ValueError("Data must be sorted ascending")
            unique_vals.append(UniqueVal(val=item, first=i, last=i))
    return unique_vals


def unique_to_normal_breaks(u_val_breaks: Sequence[int],
                            u_val_map: Sequence[UniqueVal]) -> List[int]:
    """
    Translate break indices over unique values into indices over the data.

    A break at unique index j starts a new bin at the first occurrence of
    the j-th unique value.
    """
    return [u_val_map[b].first for b in u_val_breaks]


def breaks_to_classification(breaks: Sequence[float], data: Sequence) -> Classification:
    """
    Build a Classification from interior break values and the raw data.

    Produces len(breaks) + 1 bins spanning [min(data), max(data)]. A point x
    falls in a bin when start <= x < end; the last bin also admits
    x == max(data).

    Args:
        breaks: Interior boundaries, strictly ascending, within [min, max]
        data: Data points (any order)

    Returns:
        Classification whose counts sum to len(data)

    Example:
        >>> breaks_to_classification([2.0, 5.0], [1.0, 2.0, 4.0, 5.0, 7.0, 8.0])
        [Bin(bin_start=1.0, bin_end=2.0, count=1),
         Bin(bin_start=2.0, bin_end=5.0, count=2),
         Bin(bin_start=5.0, bin_end=8.0, count=3)]
    """
    values = to_float_list(data)
    if not values:
        raise ValueError("Cannot classify empty data")

    min_value = min(values)
    max_value = max(values)

    bounds = [min_value]
    for item in to_float_list(breaks):
        if item < min_value or item > max_value:
            raise ValueError(f"Break {item} outside data range [{min_value}, {max_value}]")
        if len(bounds) > 1 and item <= bounds[-1]:
            raise ValueError("Breaks must be strictly ascending")
        bounds.append(item)
    bounds.append(max_value)

    results: Classification = [
        Bin(bin_start=bounds[i], bin_end=bounds[i + 1], count=0)
        for i in range(len(bounds) - 1)
    ]

    for item in values:
        idx = _find_bin(item, results)
        if idx is None:
            raise RuntimeError(f"Value {item} fell outside every bin")
        results[idx].count += 1

    total = sum(b.count for b in results)
    if total != len(values):
        raise RuntimeError(f"Bin counts sum to {total}, expected {len(values)}")

    return results


def _find_bin(val: float, class_: Classification) -> Optional[int]:
    last = len(class_) - 1
    for i, b in enumerate(class_):
        if b.bin_start <= val < b.bin_end:
            return i
        if i == last and b.bin_start <= val <= b.bin_end:
            return i
    return None


def classify_val(val: float, class_: Classification) -> Optional[int]:
    """
    Index of the bin containing val, or None when val lies outside
    [first.bin_start, last.bin_end].

    Example:
        >>> class_ = [Bin(0.0, 1.0, 5), Bin(1.0, 2.0, 5), Bin(2.0, 3.0, 5)]
        >>> [classify_val(v, class_) for v in (0.0, 1.5, 3.0, 3.5)]
        [0, 1, 2, None]
    """
    if not class_:
        return None
    if val < class_[0].bin_start or val > class_[-1].bin_end:
        return None
    return _find_bin(val, class_)


def format_classification(class_: Classification) -> str:
    """Render a classification as a list of "start:.. end:.. count:.." entries."""
    return "[" + ", ".join(f'"{b}"' for b in class_) + "]"
