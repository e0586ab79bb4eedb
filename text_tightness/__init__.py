"""
Text Tightness - Measuring how closely short texts cluster around a center

A lightweight alternative to embeddings for questions like "are these
recommended article titles too similar to each other?". Texts become
character-presence bitmaps; their distances to the center are summarized
by dispersion statistics and a Jenks natural-breaks partition.
"""

__version__ = "0.1.0"

from core.classification import Bin, Classification, classify_val, format_classification
from core.constants import TightnessConfig
from core.jenks import BinCountError
from core.stop_words import StopWordFilter
from .analyzer import TightnessAnalyzer

__all__ = [
    "TightnessAnalyzer",
    "TightnessConfig",
    "StopWordFilter",
    "Bin",
    "Classification",
    "BinCountError",
    "classify_val",
    "format_classification",
]
