"""
Tightness Analyzer Module

Unified interface for measuring how tightly a list of short texts clusters
around one center text.
"""

from typing import Iterable, List, Optional, Tuple
import logging

from core.classification import Classification
from core.constants import DEFAULT_CONFIG, TightnessConfig
from core.dispersion import coefficient_of_variation, mode
from core.jenks import best_jenks_classification
from core.stop_words import StopWordFilter
from core.vectorization import Vectorization


logger = logging.getLogger(__name__)


class TightnessAnalyzer:
    """
    Main analyzer interface.

    Provides methods to answer:
    - How far is each text from the center? (get_distances)
    - Which distance is most common? (get_mode)
    - How spread are the distances? (get_dispersion)
    - Into how many tight groups do they fall? (get_best_partition)

    Example:
        >>> analyzer = TightnessAnalyzer(stop_word_filter=StopWordFilter())
        >>> _ = analyzer.set_center("ab").set_list(["ab", "ac", "xy"])
        >>> analyzer.get_distances()
        [0, 2, 4]
    """

    def __init__(self,
                 config: Optional[TightnessConfig] = None,
                 stop_word_filter: Optional[StopWordFilter] = None):
        self.config = config or DEFAULT_CONFIG
        if stop_word_filter is None:
            stop_word_filter = StopWordFilter.from_file(
                self.config.stop_word_path, placeholder=self.config.placeholder
            )
        self.stop_word_filter = stop_word_filter
        self.engine = Vectorization()

    def set_center(self, text: str) -> "TightnessAnalyzer":
        self.engine.set_center(self.stop_word_filter.parse(text))
        return self

    def set_list(self, texts: Iterable[str]) -> "TightnessAnalyzer":
        self.engine.set_list(self.stop_word_filter.parse(t) for t in texts)
        return self

    def add(self, text: str) -> "TightnessAnalyzer":
        self.engine.add(self.stop_word_filter.parse(text))
        return self

    def clear(self) -> None:
        self.engine.clear()

    def get_distances(self) -> List[int]:
        """Ascending distances of every list text to the center."""
        return self.engine.get_dt()

    def get_mode(self) -> Optional[Tuple[int, int]]:
        """(distance, count) of the most common distance, or None without data."""
        return mode(self.get_distances())

    def get_dispersion(self) -> Optional[float]:
        """Coefficient of variation of the distances, or None if not computable."""
        return coefficient_of_variation(self.get_distances())

    def get_best_partition(self,
                           max_bins: Optional[int] = None) -> Optional[Tuple[int, Classification]]:
        """
        Jenks partition whose worst bin is tightest, trying 1..max_bins bins.

        Args:
            max_bins: Upper bound on bin count (config default when None)

        Returns:
            (bin count, classification) or None without data
        """
        if max_bins is None:
            max_bins = self.config.default_max_bins
        result = best_jenks_classification(self.get_distances(), max_bins)
        if result is None:
            logger.debug("no distances to partition")
        return result
