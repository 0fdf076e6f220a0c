from __future__ import annotations
from typing import Iterable, Iterator

from .config import SEPARATOR


def iter_words(stream: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-delimited words from a text stream, line by line."""
    for line in stream:
        yield from line.split()


def normalize_phrase(phrase: str) -> str:
    """Collapse whitespace runs into one separator and trim both ends."""
    return SEPARATOR.join(phrase.split())


def word_count(phrase: str) -> int:
    return len(phrase.split())
