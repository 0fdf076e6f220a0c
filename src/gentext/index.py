"""
Suffix index module for text generation.

This module builds a word-level suffix array over a TextBuffer. Each entry of
the sorted view is the offset of a word; the "suffix" is the buffer text from
that offset on. Suffixes are ordered by their first `order` words only,
compared case-insensitively, so suffixes sharing those words are tied and
form one contiguous equivalence class. A duplicate span table records, for
every sorted entry, how many entries from it onward share its prefix, which
gives the size of a class in O(1) from its first entry.
"""

from __future__ import annotations
import logging
from array import array
from typing import Iterator, List, Optional, Tuple

from .buffer import TextBuffer
from .config import SEPARATOR
from .models import Span

log = logging.getLogger(__name__)


def bounded(text: str, start: int, words: int) -> str:
    """
    Return text[start:] cut right after its `words`-th separator.

    When fewer separators remain, or `words` <= 0, the whole remainder is
    returned.

    Examples:
        >>> bounded("the cat sat ", 0, 2)
        'the cat '
        >>> bounded("the cat sat ", 4, 5)
        'cat sat '
    """
    if words <= 0:
        return text[start:]
    end = start
    for _ in range(words):
        j = text.find(SEPARATOR, end)
        if j < 0:
            return text[start:]
        end = j + len(SEPARATOR)
    return text[start:end]


def compare(a: str, b: str, words: int, a_start: int = 0, b_start: int = 0) -> int:
    """
    Order-bounded, case-insensitive comparison of two suffixes.

    Only the first `words` words of each side take part; two suffixes that
    agree on them compare equal whatever follows. If one side runs out first
    it sorts before the other. Returns a negative, zero or positive int.
    """
    x = bounded(a, a_start, words).casefold()
    y = bounded(b, b_start, words).casefold()
    return (x > y) - (x < y)


class SuffixIndex:
    """
    Sorted word-suffix view over a TextBuffer plus its duplicate span table.

    Both arrays are filled once in __init__ and only read afterwards, so one
    index can serve any number of concurrent generation calls.
    """
    def __init__(self, buffer: TextBuffer, order: int) -> None:
        if order < 1:
            raise ValueError(f"order must be >= 1, got {order}")
        self.buffer = buffer
        self.order = order
        self.view = array("q")
        self.duplicates = array("q")
        self._build()

    # ---- Build (offline) ----
    def _build(self) -> None:
        text = self.buffer.text
        # a stable sort on the bounded key orders ties by text position
        keyed: List[Tuple[str, int]] = sorted(
            ((bounded(text, p, self.order).casefold(), p) for p in self.buffer.positions),
            key=lambda kp: kp[0],
        )
        self.view = array("q", (p for _, p in keyed))

        n = len(keyed)
        dup = array("q", [1]) * n
        for i in range(n - 2, -1, -1):
            if keyed[i][0] == keyed[i + 1][0]:
                dup[i] = dup[i + 1] + 1
        self.duplicates = dup
        log.info("Suffix index built: order=%d suffixes=%d", self.order, n)

    # ---- Getters ----
    def __len__(self) -> int:
        return len(self.view)

    def position(self, i: int) -> int:
        """Text offset of the i-th sorted suffix."""
        return self.view[i]

    def span(self, i: int) -> int:
        """Number of sorted suffixes from i onward tied with suffix i."""
        return self.duplicates[i]

    def classes(self) -> Iterator[Tuple[int, int]]:
        """Yield (start, size) for every equivalence class, in sorted order."""
        i = 0
        n = len(self.view)
        while i < n:
            size = self.duplicates[i]
            yield i, size
            i += size

    # ---- Query ----
    def compare_at(self, i: int, phrase: str, words: int) -> int:
        """Compare sorted suffix i against a separator-terminated phrase."""
        return compare(self.buffer.text, phrase, words, a_start=self.view[i])

    def lower_bound(self, phrase: str, words: int) -> int:
        """First sorted index whose suffix is not below phrase on `words` words."""
        lo, hi = 0, len(self.view)
        while lo < hi:
            mid = (lo + hi) // 2
            if self.compare_at(mid, phrase, words) < 0:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def upper_bound(self, phrase: str, words: int) -> int:
        """First sorted index whose suffix is above phrase on `words` words."""
        lo, hi = 0, len(self.view)
        while lo < hi:
            mid = (lo + hi) // 2
            if self.compare_at(mid, phrase, words) <= 0:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def locate(self, phrase: str, words: int) -> Optional[Span]:
        """
        Find the sorted range whose suffixes start with `phrase`.

        The search compares min(words, order) words, since the view is not
        sorted beyond `order` words. With exactly `order` words the range end
        is read from the duplicate span table. Returns None when the
        insertion point does not start with the phrase.
        """
        bound = min(words, self.order)
        lo = self.lower_bound(phrase, bound)
        if lo == len(self.view) or self.compare_at(lo, phrase, bound) != 0:
            return None
        if bound == self.order:
            return Span(lo, lo + self.duplicates[lo])
        return Span(lo, self.upper_bound(phrase, bound))

    def members(self, span: Span, phrase: str, words: int) -> Iterator[int]:
        """
        Sorted indices in span whose first `words` words equal the phrase.

        Only phrases longer than `order` need the per-entry check; shorter
        ones match the whole span.
        """
        if words <= self.order:
            yield from range(span.start, span.stop)
            return
        for i in range(span.start, span.stop):
            if self.compare_at(i, phrase, words) == 0:
                yield i
