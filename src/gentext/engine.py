# src/gentext/engine.py
from __future__ import annotations

import os
import random
import logging
from typing import Iterable, Optional

from . import config as CFG
from .generator import TextGenerator, create
from .loader import load
from .models import Generated
from .sampling import from_random
from .tokenizer import normalize_phrase, word_count

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - corpus loading (loader.load / generator.create),
      - the suffix-index text generator,
      - per-call randomness.

    Public API (used by CLI/Flask):
      * build(paths, ...):      read files/folders -> index
      * build_text(text, ...):  index an in-memory string
      * generate(phrase, ...):  return a Generated result
      * stats():                shape of the loaded index
      * shutdown():             drop the index
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.generator: Optional[TextGenerator] = None

    # /* ~~~ Build an index from source files and folders ~~~ */
    def build(
        self,
        paths: Iterable[str],
        *,
        order: Optional[int] = None,
        sampler: Optional[str] = None,   # "span" | "reservoir"
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["GENTEXT_VERBOSE"] = "1"

        paths = [paths] if isinstance(paths, (str, os.PathLike)) else list(paths)
        if not paths:
            raise ValueError("build(): at least one source path is required")

        log.info("Loading corpus from %s", paths)
        self.generator = load(paths, order=order, sampler=sampler)
        log.info("Engine build() complete: %s", self.stats())

    # /* ~~~ Build from text already in memory ~~~ */
    def build_text(self, text: str, *, order: Optional[int] = None, sampler: Optional[str] = None) -> None:
        self.generator = create(
            text,
            order if order is not None else CFG.DEFAULT_ORDER,
            sampler or CFG.SAMPLER,
        )
        log.info("Engine build_text() complete: %s", self.stats())

    # ------------- query -------------

    # /* ~~~ Generate a continuation; each call owns its random source ~~~ */
    def generate(
        self,
        phrase: Optional[str] = None,
        *,
        max_words: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> Generated:
        gen = self._require()
        rng = random.Random(seed)
        if max_words is None:
            max_words = rng.randrange(CFG.MIN_WORDS, CFG.MAX_WORDS)
        text = gen.generate(from_random(rng), max_words, phrase)
        norm = normalize_phrase(phrase) if phrase is not None else None
        seed_words = word_count(norm) if norm is not None else 1
        return Generated(
            text=text,
            phrase=norm,
            words=len(text.split()) - seed_words,
            order=gen.order,
        )

    def stats(self) -> dict:
        gen = self._require()
        return {
            "order": gen.order,
            "words": len(gen),
            "classes": sum(1 for _ in gen.index.classes()),
            "sampler": getattr(gen.sampler, "name", type(gen.sampler).__name__),
        }

    # ------------- teardown -------------

    # /* ~~~ Release the index ~~~ */
    def shutdown(self) -> None:
        self.generator = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require(self) -> TextGenerator:
        if self.generator is None:
            raise RuntimeError("Engine not initialized. Call build() or build_text() first.")
        return self.generator
