"""
Stop-Word Filter

Blanks out stop-words before vectorization so that filler words do not
count as shared characters. Every matched character is overwritten with a
placeholder, so the filtered text keeps its exact length and every other
character keeps its position.

Usage:
    from core.stop_words import StopWordFilter

    flt = StopWordFilter(["the", "of"])
    flt.parse("end of the road")  # 'end __ ___ road'

    flt = StopWordFilter.from_file(".stop_word.txt")
"""

from pathlib import Path
from typing import Iterable, List, Optional, Pattern, Union
import logging
import re

from .constants import PLACEHOLDER


logger = logging.getLogger(__name__)


class StopWordFilter:
    """Multi-pattern matcher replacing every stop-word occurrence with a placeholder."""

    def __init__(self, stop_words: Iterable[str] = (), placeholder: str = PLACEHOLDER):
        if len(placeholder) != 1:
            raise ValueError(f"Placeholder must be one character, got {placeholder!r}")
        self.placeholder = placeholder
        self.stop_words: List[str] = []
        self._pattern: Optional[Pattern] = None
        self._dirty = False
        for word in stop_words:
            self.add_stop_word(word)

    @classmethod
    def from_file(cls, path: Union[str, Path], placeholder: str = PLACEHOLDER) -> "StopWordFilter":
        """
        Load one stop-word per line. A missing file gives an empty filter.
        """
        path = Path(path)
        if not path.exists():
            logger.warning("stop-word file %s not found, filtering disabled", path)
            return cls(placeholder=placeholder)

        with path.open("r", encoding="utf-8") as f:
            words = [line.rstrip("\r\n") for line in f]
        flt = cls(words, placeholder=placeholder)
        logger.info("loaded %d stop-words from %s", len(flt.stop_words), path)
        return flt

    def add_stop_word(self, word: str) -> "StopWordFilter":
        if word:
            self.stop_words.append(word)
            self._dirty = True
        return self

    def _compile(self) -> Optional[Pattern]:
        if self._dirty:
            # longer alternatives first so "stop words" beats "stop"
            ordered = sorted(set(self.stop_words), key=len, reverse=True)
            self._pattern = re.compile("|".join(re.escape(w) for w in ordered))
            self._dirty = False
        return self._pattern

    def __len__(self) -> int:
        return len(self.stop_words)

    def parse(self, text: str) -> str:
        """Return a copy of text with every stop-word match blanked out."""
        pattern = self._compile()
        if pattern is None:
            return text
        result = pattern.sub(lambda m: self.placeholder * len(m.group()), text)
        if len(result) != len(text):
            raise RuntimeError("Stop-word replacement changed text length")
        return result
