# src/gentext/sampling.py
from __future__ import annotations
import random as _random
from typing import Callable, Optional, Protocol

from .index import SuffixIndex

# A randomness source: any zero-argument callable returning an int.
# The core never creates one; every generation call is handed its own.
RandomSource = Callable[[], int]


def from_random(rng: _random.Random) -> RandomSource:
    """Adapt a random.Random instance to a RandomSource."""
    return lambda: rng.getrandbits(31)


def draw(random: RandomSource, n: int) -> int:
    """Uniform int in [0, n) taken from one value of the source."""
    return abs(random()) % n


class Sampler(Protocol):
    """Chooses one suffix uniformly among those starting with a phrase."""
    def pick(self, index: SuffixIndex, phrase: str, words: int,
             random: RandomSource) -> Optional[int]: ...


class SpanSampler:
    """Uses the precomputed duplicate span: one binary search, one draw."""

    name = "span"

    def pick(self, index: SuffixIndex, phrase: str, words: int,
             random: RandomSource) -> Optional[int]:
        span = index.locate(phrase, words)
        if span is None:
            return None
        if words <= index.order:
            return span.start + draw(random, span.size)
        # phrase longer than the sort key: only some of the class matches
        hits = list(index.members(span, phrase, words))
        if not hits:
            return None
        return hits[draw(random, len(hits))]


class ReservoirSampler:
    """
    Single forward pass from the insertion point, no span table needed.

    The j-th matching suffix (1-based) replaces the current choice when
    draw(j) == 0, which leaves every match equally likely.
    """

    name = "reservoir"

    def pick(self, index: SuffixIndex, phrase: str, words: int,
             random: RandomSource) -> Optional[int]:
        bound = min(words, index.order)
        choice: Optional[int] = None
        seen = 0
        i = index.lower_bound(phrase, bound)
        while i < len(index) and index.compare_at(i, phrase, bound) == 0:
            if words <= index.order or index.compare_at(i, phrase, words) == 0:
                seen += 1
                if draw(random, seen) == 0:
                    choice = i
            i += 1
        return choice


_SAMPLERS = {
    SpanSampler.name: SpanSampler,
    ReservoirSampler.name: ReservoirSampler,
}


def make_sampler(name: str) -> Sampler:
    """
    Factory:
      - "span"      -> SpanSampler
      - "reservoir" -> ReservoirSampler
    """
    try:
        return _SAMPLERS[name]()
    except KeyError:
        raise ValueError(f"Unsupported sampler: {name!r} (choose from {sorted(_SAMPLERS)})") from None
