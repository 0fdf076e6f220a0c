from __future__ import annotations
import os
from typing import Iterable, Iterator, List, Optional, Union

from .buffer import TextBuffer
from .config import DEFAULT_ORDER, EXCLUDE_DIRS, INCLUDE_EXTS, SAMPLER
from .generator import TextGenerator
from .sampling import make_sampler
from .tokenizer import iter_words

# Progress logging (set GENTEXT_VERBOSE=1 to enable)
PROGRESS_EVERY_FILES = 500
PROGRESS_EVERY_WORDS = 1_000_000


def _verbose() -> bool:
    return os.environ.get("GENTEXT_VERBOSE") == "1"


def _as_list(paths: Union[str, os.PathLike, Iterable[Union[str, os.PathLike]]]) -> List[str]:
    if isinstance(paths, (str, os.PathLike)):
        return [os.fspath(paths)]
    return [os.fspath(p) for p in paths]


def iter_sources(paths: Iterable[str]) -> Iterator[str]:
    """
    Yield training files in a stable order.
    Files are taken as given; directories are walked for INCLUDE_EXTS files.
    """
    exts = tuple(e.lower() for e in INCLUDE_EXTS)
    for path in paths:
        if os.path.isfile(path):
            yield path
            continue
        if not os.path.isdir(path):
            raise FileNotFoundError(path)
        for dirpath, dirnames, filenames in os.walk(path):
            dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDE_DIRS)
            for fn in sorted(filenames):
                if fn.lower().endswith(exts):
                    yield os.path.join(dirpath, fn)


def iter_corpus_words(paths: Iterable[str]) -> Iterator[str]:
    """Words of every source file, in file order."""
    verbose = _verbose()
    file_count = 0
    word_count = 0
    for path in iter_sources(paths):
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            for w in iter_words(f):
                yield w
                word_count += 1
                if verbose and word_count % PROGRESS_EVERY_WORDS == 0:
                    print(f"[loaded] words={word_count:,}")
        file_count += 1
        if verbose and file_count % PROGRESS_EVERY_FILES == 0:
            print(f"[scanned] files={file_count:,}")
    if verbose:
        print(f"[done] files={file_count:,} words={word_count:,}")


def load(paths, order: Optional[int] = None, sampler: Optional[str] = None) -> TextGenerator:
    """
    Read one or more files/folders and index them as a single corpus.
    order/sampler fall back to config defaults.
    """
    buffer = TextBuffer.from_words(iter_corpus_words(_as_list(paths)))
    return TextGenerator(
        buffer,
        order if order is not None else DEFAULT_ORDER,
        make_sampler(sampler or SAMPLER),
    )
