from __future__ import annotations
from array import array
from dataclasses import dataclass
from typing import Iterable, List
import bisect

from .config import SEPARATOR


@dataclass(frozen=True)
class TextBuffer:
    """
    All corpus words concatenated, each followed by one SEPARATOR.

    positions[i] is the offset where word i starts; it is also one past the
    separator that ends word i-1. Offsets are strictly increasing and are
    never mutated after from_words().
    """
    text: str
    positions: array  # array('q')

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "TextBuffer":
        parts: List[str] = []
        positions = array("q")
        cur = 0
        for w in words:
            positions.append(cur)
            parts.append(w)
            parts.append(SEPARATOR)
            cur += len(w) + len(SEPARATOR)
        return cls(text="".join(parts), positions=positions)

    def __len__(self) -> int:
        return len(self.positions)

    def _end(self, i: int) -> int:
        """Offset one past the separator of word i-1, i.e. where word i starts (or EOF)."""
        return self.positions[i] if i < len(self.positions) else len(self.text)

    def word(self, i: int) -> str:
        """Word i without its trailing separator."""
        return self.text[self.positions[i]:self._end(i + 1) - len(SEPARATOR)]

    def window(self, i: int, count: int) -> str:
        """Words i .. i+count-1, each followed by the separator."""
        return self.text[self.positions[i]:self._end(i + count)]

    def index_of(self, position: int) -> int:
        """
        Map a text offset back to its word number.

        Every offset handed out by the suffix index is a word start; anything
        else means the index no longer matches the buffer.
        """
        i = bisect.bisect_left(self.positions, position)
        if i == len(self.positions) or self.positions[i] != position:
            raise RuntimeError(f"offset {position} is not a word boundary; suffix index is corrupt")
        return i
