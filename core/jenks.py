"""
Jenks Natural-Breaks Classifier

Partitions sorted data into k contiguous, non-empty groups minimizing the
total within-group sum of squared deviations (Fisher's exact dynamic
program).

Repeated values are compressed first: the program runs over runs of
identical values (UniqueVal), each weighted by its length, so duplicates
never end up split across two bins and long runs do not inflate the search.
The resulting unique-space breaks are expanded back onto the original data.

Best-k search:
    For k = 1..max_bins, classify and take the largest per-bin population
    standard deviation. The k whose worst bin is tightest wins; ties go to
    the smaller k. A small winning k means the distances are converged, a
    large one means they are dispersed.
"""

from typing import List, Optional, Sequence, Tuple
import logging

import numpy as np

from .classification import (
    Classification,
    UniqueVal,
    breaks_to_classification,
    create_unique_val_mapping,
    to_float_list,
    unique_to_normal_breaks,
)
from .dispersion import std_deviation


logger = logging.getLogger(__name__)


class BinCountError(ValueError):
    """Requested bin count is below 1 or above the number of distinct values."""


def _run_prefix_sums(unique_vals: Sequence[UniqueVal]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Cumulative weight, weighted sum and weighted sum of squares per run."""
    vals = np.array([u.val for u in unique_vals], dtype=np.float64)
    weights = np.array([u.last - u.first + 1 for u in unique_vals], dtype=np.float64)
    w = np.concatenate(([0.0], np.cumsum(weights)))
    s1 = np.concatenate(([0.0], np.cumsum(weights * vals)))
    s2 = np.concatenate(([0.0], np.cumsum(weights * vals * vals)))
    return w, s1, s2


def jenks_unique_breaks(unique_vals: Sequence[UniqueVal], num_bins: int) -> List[int]:
    """
    Optimal break positions over unique-value runs.

    Args:
        unique_vals: Runs of sorted data (from create_unique_val_mapping)
        num_bins: Number of groups, 1 <= num_bins <= len(unique_vals)

    Returns:
        num_bins - 1 ascending run indices; each one starts a new group
    """
    m = len(unique_vals)
    if num_bins < 1 or num_bins > m:
        raise BinCountError(f"num_bins={num_bins} out of range [1, {m}]")

    w, s1, s2 = _run_prefix_sums(unique_vals)

    def ssd(i: int, j: int) -> float:
        # squared deviation of runs i..j-1 around their own mean
        n = w[j] - w[i]
        s = s1[j] - s1[i]
        return max(float(s2[j] - s2[i] - s * s / n), 0.0)

    cost = np.full((num_bins + 1, m + 1), np.inf)
    start = np.zeros((num_bins + 1, m + 1), dtype=np.int64)
    for j in range(1, m + 1):
        cost[1, j] = ssd(0, j)

    for c in range(2, num_bins + 1):
        for j in range(c, m + 1):
            best = np.inf
            best_i = c - 1
            for i in range(c - 1, j):
                candidate = cost[c - 1, i] + ssd(i, j)
                if candidate < best:
                    best = candidate
                    best_i = i
            cost[c, j] = best
            start[c, j] = best_i

    breaks = []
    j = m
    for c in range(num_bins, 1, -1):
        j = int(start[c, j])
        breaks.append(j)
    breaks.reverse()
    return breaks


def get_jenks_classification(num_bins: int, data: Sequence) -> Classification:
    """
    Jenks natural-breaks classification of data into num_bins bins.

    Args:
        num_bins: Requested bin count, 1 <= num_bins <= distinct values
        data: Numeric data (sorted internally)

    Returns:
        Classification with num_bins non-empty bins

    Raises:
        ValueError: data is empty
        BinCountError: num_bins out of range
    """
    sorted_data = sorted(to_float_list(data))
    if not sorted_data:
        raise ValueError("Cannot classify empty data")

    unique_vals = create_unique_val_mapping(sorted_data)
    u_breaks = jenks_unique_breaks(unique_vals, num_bins)
    normal_breaks = unique_to_normal_breaks(u_breaks, unique_vals)
    breaks = [sorted_data[i] for i in normal_breaks]
    return breaks_to_classification(breaks, sorted_data)


def max_bin_std_deviation(sorted_data: Sequence, class_: Classification) -> float:
    """
    Largest population standard deviation over the bins of a classification.

    Bins are contiguous over the sorted data, so each bin is the next
    bin.count points.
    """
    values = to_float_list(sorted_data)
    max_dev = 0.0
    start = 0
    for b in class_:
        dev = std_deviation(values[start:start + b.count])
        if dev is not None and dev > max_dev:
            max_dev = dev
        start += b.count
    return max_dev


def best_jenks_classification(data: Sequence,
                              max_bins: int) -> Optional[Tuple[int, Classification]]:
    """
    Search k = 1..max_bins for the classification with the tightest worst bin.

    Candidates above the number of distinct values are skipped, since they
    cannot be built without empty bins.

    Args:
        data: Distance collection
        max_bins: Largest bin count to try (>= 1)

    Returns:
        (chosen bin count, classification), or None for empty data
    """
    if max_bins < 1:
        raise BinCountError(f"max_bins must be >= 1, got {max_bins}")

    sorted_data = sorted(to_float_list(data))
    if not sorted_data:
        logger.debug("best_jenks_classification: empty input")
        return None

    distinct = len(create_unique_val_mapping(sorted_data))
    best_n = 0
    best_class: Classification = []
    min_dev = np.inf
    for num_bins in range(1, min(max_bins, distinct) + 1):
        class_ = get_jenks_classification(num_bins, sorted_data)
        max_dev = max_bin_std_deviation(sorted_data, class_)
        logger.debug("jenks k=%d max_bin_std=%.4f", num_bins, max_dev)
        if max_dev < min_dev:
            min_dev = max_dev
            best_n = num_bins
            best_class = class_

    logger.debug("jenks chose k=%d of %d candidates", best_n, min(max_bins, distinct))
    return best_n, best_class
