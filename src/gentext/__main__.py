from __future__ import annotations
import argparse, logging, os, random, sys, time
from . import config as CFG
from .loader import load
from .sampling import from_random


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Generate text continuations for lines read from stdin")
    p.add_argument("path", help="Training text file (or folder of .txt files)")
    p.add_argument("--order", type=int, default=CFG.DEFAULT_ORDER, help="Words of context")
    p.add_argument("--sampler", choices=["span", "reservoir"], default=CFG.SAMPLER)
    p.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.order < 1:
        p.error("--order must be >= 1")
    if args.verbose:
        logging.basicConfig(level=logging.INFO)
        os.environ["GENTEXT_VERBOSE"] = "1"

    print(f"Loading {args.path}")
    t0 = time.perf_counter()
    try:
        gen = load(args.path, order=args.order, sampler=args.sampler)
    except FileNotFoundError as e:
        p.error(f"no such file or directory: {e}")
    print(f"Took {(time.perf_counter() - t0) * 1000:,.0f} ms")

    rng = random.Random(args.seed)
    source = from_random(rng)
    try:
        for line in sys.stdin:
            n = rng.randrange(CFG.MIN_WORDS, CFG.MAX_WORDS)
            phrase = line if line.strip() else None  # blank line: random start
            print(gen.generate(source, n, phrase), flush=True)
    except KeyboardInterrupt:
        pass
    except RuntimeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
