"""
Vocabulary & Vectorization Engine

Design principles:
- One vocabulary per run, rebuilt from scratch on every distance request
- TextVector instances are immutable; operations return new instances
- Presence only: repeating a character in a text does not add weight

Vector Format:
    Each TextVector is a numpy uint8 BITMAP (np.packbits layout).
    Bit i is set when the text contains the character with vocabulary index i.

    Operations:
      - Union:                OR  (bits_a | bits_b)
      - Intersection:         AND (bits_a & bits_b)
      - Symmetric difference: XOR (bits_a ^ bits_b)

    Distance between two texts is the popcount of their XOR: the number of
    distinct characters present in exactly one of them.

Usage:
    engine = Vectorization()
    engine.set_center("ab")
    engine.set_list(["ab", "ac", "xy"])
    engine.get_dt()  # [0, 2, 4]
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List, Optional
import logging

import numpy as np


logger = logging.getLogger(__name__)

BITMAP_DTYPE = np.uint8  # packed storage for every TextVector


class Vocabulary:
    """
    Characters ranked by descending frequency.

    Frequent characters get low indices, so they occupy the low bits of
    every bitmap. Equal counts keep first-seen order.
    """

    def __init__(self, chars: Iterable[str] = ()):
        self.chars: List[str] = list(chars)
        self._index: Dict[str, int] = {ch: i for i, ch in enumerate(self.chars)}

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> "Vocabulary":
        """Tally every character of every text and rank them."""
        counts: Counter = Counter()
        for text in texts:
            counts.update(text)
        # sorted() is stable and Counter keeps insertion order
        ranked = sorted(counts.items(), key=lambda item: -item[1])
        return cls(ch for ch, _ in ranked)

    def index(self, ch: str) -> int:
        """Rank of ch; unknown characters fall back to 0."""
        return self._index.get(ch, 0)

    def __len__(self) -> int:
        return len(self.chars)

    def __contains__(self, ch: str) -> bool:
        return ch in self._index

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self)})"


class TextVector:
    """Immutable presence bitmap over a vocabulary."""

    __slots__ = ("_bits", "size")

    def __init__(self, bits: np.ndarray, size: int):
        bits = np.asarray(bits, dtype=BITMAP_DTYPE).copy()
        bits.flags.writeable = False
        self._bits = bits
        self.size = size

    @classmethod
    def from_indices(cls, indices: Iterable[int], size: int) -> "TextVector":
        presence = np.zeros(max(size, 1), dtype=bool)
        for i in indices:
            presence[i] = True
        return cls(np.packbits(presence), size)

    @property
    def bits(self) -> np.ndarray:
        return self._bits

    def indices(self) -> List[int]:
        """Set vocabulary indices, ascending."""
        presence = np.unpackbits(self._bits)[:self.size]
        return np.flatnonzero(presence).tolist()

    def _check(self, other: TextVector):
        if self.size != other.size:
            raise ValueError(f"Vectors built over different vocabularies: {self.size} vs {other.size}")

    def union(self, other: TextVector) -> TextVector:
        self._check(other)
        return TextVector(self._bits | other._bits, self.size)

    def intersect(self, other: TextVector) -> TextVector:
        self._check(other)
        return TextVector(self._bits & other._bits, self.size)

    def symmetric_difference(self, other: TextVector) -> TextVector:
        self._check(other)
        return TextVector(self._bits ^ other._bits, self.size)

    def cardinality(self) -> int:
        return int(np.unpackbits(self._bits).sum())

    def distance(self, other: TextVector) -> int:
        """Size of the symmetric difference."""
        return self.symmetric_difference(other).cardinality()

    def __len__(self) -> int:
        return self.cardinality()

    def __eq__(self, other):
        if not isinstance(other, TextVector):
            return False
        return self.size == other.size and np.array_equal(self._bits, other._bits)

    def __hash__(self):
        return hash((self.size, self._bits.tobytes()))

    def __repr__(self) -> str:
        return f"TextVector(indices={self.indices()})"


class Vectorization:
    """
    Distance engine for one center text and a list of comparison texts.

    Texts are expected to be stop-word filtered already.
    """

    def __init__(self):
        self.list: List[str] = []
        self.center: str = ""
        self.vocabulary: Vocabulary = Vocabulary()
        self.dt: List[int] = []

    def set_center(self, text: str) -> None:
        self.center = text

    def set_list(self, texts: Iterable[str]) -> None:
        self.list = list(texts)

    def add(self, text: str) -> None:
        self.list.append(text)

    def clear(self) -> None:
        self.list = []
        self.center = ""
        self.vocabulary = Vocabulary()
        self.dt = []

    def word_count(self) -> int:
        """Vocabulary size of the last computation."""
        return len(self.vocabulary)

    def build_vocabulary(self) -> Vocabulary:
        self.vocabulary = Vocabulary.from_texts(self.list + [self.center])
        logger.debug("vocabulary built: %d distinct characters", len(self.vocabulary))
        return self.vocabulary

    def vectorize(self, text: str, vocabulary: Optional[Vocabulary] = None) -> TextVector:
        vocab = vocabulary if vocabulary is not None else self.vocabulary
        return TextVector.from_indices((vocab.index(ch) for ch in text), len(vocab))

    def get_dt(self) -> List[int]:
        """
        Rebuild the vocabulary and return the ascending distances of every
        list text to the center (one per text).
        """
        vocab = self.build_vocabulary()
        center_vec = self.vectorize(self.center, vocab)
        distances = np.array(
            [center_vec.distance(self.vectorize(text, vocab)) for text in self.list],
            dtype=np.int64,
        )
        self.dt = np.sort(distances).tolist()
        logger.debug("computed %d distances to center", len(self.dt))
        return self.dt
