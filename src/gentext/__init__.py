"""
Suffix-Array Text Generator

This package builds an order-k word-level suffix index over a training text
and walks it at random to produce statistically plausible continuations of a
seed phrase (Programming Pearls, Column 15).

- Tokenizing and buffering the corpus words
- Sorting word suffixes by their first k words, case-insensitively
- Sampling uniformly among suffixes that share a phrase
- Orchestration for the CLI and the web frontend

Main Functions:
    create(source, order): index a text stream or string
    TextGenerator.generate(random, max_words, phrase=None): random walk

Example Usage:
    import random
    from gentext import create, from_random

    gen = create(open("book.txt", encoding="utf-8"), order=2)
    print(gen.generate(from_random(random.Random(7)), 20, "it was"))
"""

# src/gentext/__init__.py
from .generator import TextGenerator, create  # re-export
from .sampling import RandomSource, from_random, make_sampler
from .engine import Engine

__version__ = "1.0.0"
__all__ = ["TextGenerator", "create", "RandomSource", "from_random", "make_sampler", "Engine"]
