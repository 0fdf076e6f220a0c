# src/gentext/models.py
"""
Data models for the text generator.

- Span: a contiguous range of the sorted suffix view sharing one prefix.
- Generated: the result object returned by Engine.generate().

Like the rest of the models, these carry no logic beyond trivial
properties; building and walking the index lives elsewhere.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Span:
    """
    Half-open range [start, stop) of the sorted suffix view.

    Every entry in the range starts with the same phrase, compared
    case-insensitively over the phrase's words.
    """
    start: int
    stop: int

    @property
    def size(self) -> int:
        return self.stop - self.start


@dataclass(frozen=True, slots=True)
class Generated:
    """
    The result item returned by Engine.generate().

    Attributes
    ----------
    text : str
        The seed phrase followed by the generated continuation, words
        joined by single spaces.
    phrase : Optional[str]
        The normalized seed phrase, or None when the walk started from a
        random word.
    words : int
        Number of words generated after the seed.
    order : int
        Order of the index that produced the text.
    """
    text: str
    phrase: Optional[str]
    words: int
    order: int
