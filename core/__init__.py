"""
Text Tightness Core Module

This module provides the measurement pipeline behind TightnessAnalyzer:
- stop_words: blank out stop-words, keeping text length and positions
- vectorization: frequency-ranked vocabulary, presence bitmaps, distances
- dispersion: mode, mean, standard deviation, coefficient of variation
- classification: bins, unique-value runs, value-to-bin lookup
- jenks: natural-breaks classifier and best bin-count search

================================================================================
PIPELINE
================================================================================

    raw texts → StopWordFilter → Vocabulary → TextVector bitmaps
              → XOR popcount to center → sorted distances
              → dispersion statistics and/or Jenks best partition

Distances count DISTINCT characters present in exactly one of the two texts.
They are not edit distances: order and repetition of characters are ignored.
"""

from .constants import (
    PLACEHOLDER,
    STOP_WORD_FILE,
    DEFAULT_MAX_BINS,
    TightnessConfig,
    DEFAULT_CONFIG,
)

from .stop_words import StopWordFilter

from .vectorization import (
    Vocabulary,
    TextVector,
    Vectorization,
)

from .dispersion import (
    mode,
    mean,
    std_deviation,
    coefficient_of_variation,
)

from .classification import (
    UniqueVal,
    Bin,
    Classification,
    to_float_list,
    create_unique_val_mapping,
    unique_to_normal_breaks,
    breaks_to_classification,
    classify_val,
    format_classification,
)

from .jenks import (
    BinCountError,
    jenks_unique_breaks,
    get_jenks_classification,
    max_bin_std_deviation,
    best_jenks_classification,
)

__all__ = [
    # Configuration
    'PLACEHOLDER',
    'STOP_WORD_FILE',
    'DEFAULT_MAX_BINS',
    'TightnessConfig',
    'DEFAULT_CONFIG',

    # Text preparation
    'StopWordFilter',

    # Vectorization
    'Vocabulary',
    'TextVector',
    'Vectorization',

    # Dispersion statistics
    'mode',
    'mean',
    'std_deviation',
    'coefficient_of_variation',

    # Classification primitives
    'UniqueVal',
    'Bin',
    'Classification',
    'to_float_list',
    'create_unique_val_mapping',
    'unique_to_normal_breaks',
    'breaks_to_classification',
    'classify_val',
    'format_classification',

    # Jenks natural breaks
    'BinCountError',
    'jenks_unique_breaks',
    'get_jenks_classification',
    'max_bin_std_deviation',
    'best_jenks_classification',
]
