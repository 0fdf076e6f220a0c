"""
Text generator based on Programming Pearls, Column 15.

The training text is indexed once as a word-level suffix array sorted by the
first `order` words. Generation is a random walk: find the suffixes that
start with the current phrase, pick one uniformly, emit the word that follows
the phrase there, and slide the phrase forward by that word.
"""

from __future__ import annotations
import io
import logging
from typing import List, Optional, TextIO, Union

from .buffer import TextBuffer
from .config import DEFAULT_ORDER, SAMPLER, SEPARATOR
from .index import SuffixIndex
from .sampling import RandomSource, Sampler, draw, make_sampler
from .tokenizer import iter_words, normalize_phrase

log = logging.getLogger(__name__)


class TextGenerator:
    """
    Immutable order-k text model. Safe to share between threads as long as
    every generate() call brings its own randomness source.
    """
    def __init__(self, buffer: TextBuffer, order: int, sampler: Optional[Sampler] = None) -> None:
        if order < 1:
            raise ValueError(f"order must be >= 1, got {order}")
        self.buffer = buffer
        self.order = order
        self.index = SuffixIndex(buffer, order)
        self.sampler = sampler if sampler is not None else make_sampler(SAMPLER)

    def __len__(self) -> int:
        return len(self.buffer)

    def generate(self, random: RandomSource, max_words: int, phrase: Optional[str] = None) -> str:
        """
        Generate up to `max_words` words after a seed.

        With no phrase, the seed is one word drawn uniformly from the corpus.
        Otherwise the seed is the phrase with its whitespace collapsed; it may
        hold any number of words and is matched case-insensitively. The
        result is the seed followed by the generated words, joined by single
        spaces. The walk stops early when the current phrase does not occur
        in the corpus or the text ends right after it.
        """
        if len(self.buffer) == 0:
            raise RuntimeError("corpus is empty; there is no word to start from")

        if phrase is None:
            seed = self.buffer.word(draw(random, len(self.buffer)))
        else:
            seed = normalize_phrase(phrase)
            if not seed:
                raise ValueError("seed phrase must contain at least one word")

        words = seed.split(SEPARATOR)
        out = self._walk(random, max_words, seed + SEPARATOR, len(words))
        return SEPARATOR.join(words + out)

    def _walk(self, random: RandomSource, max_words: int, phrase: str, count: int) -> List[str]:
        out: List[str] = []
        for _ in range(max_words):
            i = self.sampler.pick(self.index, phrase, count, random)
            if i is None:
                log.debug("phrase %r not in corpus; stopping after %d words", phrase, len(out))
                break

            start = self.buffer.index_of(self.index.position(i))
            nxt = start + count
            if nxt >= len(self.buffer):
                log.debug("text ends after %r; stopping after %d words", phrase, len(out))
                break
            out.append(self.buffer.word(nxt))

            # next phrase: the last min(count + 1, order) words ending at nxt
            count = min(count + 1, self.order)
            phrase = self.buffer.window(nxt - count + 1, count)
        return out


def create(source: Union[TextIO, str], order: int = DEFAULT_ORDER, sampler: Union[str, Sampler] = SAMPLER) -> TextGenerator:
    """
    Build a generator from a readable text stream (or a string).

    The stream is only read during this call; the caller may close it
    afterwards.
    """
    if order < 1:
        raise ValueError(f"order must be >= 1, got {order}")
    if isinstance(source, str):
        source = io.StringIO(source)
    if isinstance(sampler, str):
        sampler = make_sampler(sampler)
    buffer = TextBuffer.from_words(iter_words(source))
    log.info("Loaded %d words", len(buffer))
    return TextGenerator(buffer, order, sampler)
