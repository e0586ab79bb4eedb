"""
Dispersion Statistics

Pure functions over a collection of non-negative distances. Every function
returns None when the statistic is not computable (empty input, zero mean)
instead of raising or producing NaN.
"""

from collections import Counter
from typing import Optional, Sequence, Tuple
import logging

import numpy as np


logger = logging.getLogger(__name__)


def mode(values: Sequence[int]) -> Optional[Tuple[int, int]]:
    """
    Most frequent value and its occurrence count.

    Ties are broken by the smallest tied value, so the result does not
    depend on input order.

    Returns:
        (value, count) or None for empty input
    """
    if len(values) == 0:
        logger.debug("mode: empty input")
        return None
    counts = Counter(int(v) for v in values)
    value, count = min(counts.items(), key=lambda item: (-item[1], item[0]))
    return value, count


def mean(values: Sequence[float]) -> Optional[float]:
    """Arithmetic mean, or None for empty input."""
    if len(values) == 0:
        logger.debug("mean: empty input")
        return None
    return float(np.mean(np.asarray(values, dtype=np.float64)))


def std_deviation(values: Sequence[float]) -> Optional[float]:
    """Population standard deviation (divides by count), or None for empty input."""
    if len(values) == 0:
        logger.debug("std_deviation: empty input")
        return None
    return float(np.std(np.asarray(values, dtype=np.float64), ddof=0))


def coefficient_of_variation(values: Sequence[float]) -> Optional[float]:
    """
    Standard deviation divided by mean.

    A scale-free measure of how spread the distances are around the center:
    small values mean the texts sit at similar distances.

    Returns:
        The coefficient, or None if the collection is empty or its mean is zero
    """
    dev = std_deviation(values)
    m = mean(values)
    if dev is None or m is None:
        return None
    if m == 0:
        logger.debug("coefficient_of_variation: zero mean")
        return None
    return dev / m
