# core/constants.py
"""
Text Tightness Constants

This module defines the defaults used throughout the measurement pipeline:

LAYER 1: Text Preparation
- PLACEHOLDER: Character written over every matched stop-word
- STOP_WORD_FILE: Default stop-word list (one word per line)

LAYER 2: Partitioning
- DEFAULT_MAX_BINS: Upper bound on candidate bin counts in the Jenks search

TightnessConfig bundles these values into one immutable object.
"""
from dataclasses import dataclass


# =============================================================================
# LAYER 1: Text Preparation
# =============================================================================

PLACEHOLDER = "_"
STOP_WORD_FILE = ".stop_word.txt"


# =============================================================================
# LAYER 2: Partitioning
# =============================================================================

# Nine titles can be split into at most nine bins; fewer is faster but coarser
DEFAULT_MAX_BINS = 9

assert DEFAULT_MAX_BINS >= 1, "DEFAULT_MAX_BINS must be >= 1"


@dataclass(frozen=True)
class TightnessConfig:
    """
    Configuration for one analysis run.

    Attributes:
        placeholder: Single character overwriting stop-word matches
        stop_word_path: File the default stop-word filter is loaded from
        default_max_bins: Max bin count used when the caller gives none

    Example:
        >>> config = TightnessConfig(placeholder="#", default_max_bins=5)
        >>> config.placeholder
        '#'
    """
    placeholder: str = PLACEHOLDER
    stop_word_path: str = STOP_WORD_FILE
    default_max_bins: int = DEFAULT_MAX_BINS

    def __post_init__(self):
        if len(self.placeholder) != 1:
            raise ValueError(f"Placeholder must be one character, got {self.placeholder!r}")
        if self.default_max_bins < 1:
            raise ValueError(f"default_max_bins must be >= 1, got {self.default_max_bins}")


DEFAULT_CONFIG = TightnessConfig()
