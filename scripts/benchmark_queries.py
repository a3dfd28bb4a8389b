#!/usr/bin/env python3
from __future__ import annotations

import argparse
import random
import string
import time
from dataclasses import dataclass
from pathlib import Path

from tqdm import tqdm


@dataclass(frozen=True)
class Args:
    dictionary: str
    num_samples: int
    seed: int
    max_distance: int
    max_results: int
    no_prune: bool


def _parse_args() -> Args:
    p = argparse.ArgumentParser(
        description=(
            "Sample dictionary words, inject one random typo each, run partial_match, and report latency/hit rate."
        )
    )
    p.add_argument("--dictionary", required=True, help="word,frequency dictionary file.")
    p.add_argument("--num-samples", type=int, default=200, help="How many words to misspell and query.")
    p.add_argument("--seed", type=int, default=55, help="Sampling seed.")
    p.add_argument("--max-distance", type=int, default=2)
    p.add_argument("--max-results", type=int, default=10)
    p.add_argument("--no-prune", action="store_true", help="Evaluate every leaf (disables branch-and-bound).")
    a = p.parse_args()
    return Args(
        dictionary=str(a.dictionary),
        num_samples=int(a.num_samples),
        seed=int(a.seed),
        max_distance=int(a.max_distance),
        max_results=int(a.max_results),
        no_prune=bool(a.no_prune),
    )


def misspell(word: str, rng: random.Random) -> str:
    """Apply one random delete, insert, substitute or adjacent swap."""
    letters = string.ascii_lowercase
    i = rng.randrange(len(word))
    kind = rng.choice(("delete", "insert", "substitute", "swap"))
    if kind == "delete" and len(word) > 1:
        return word[:i] + word[i + 1 :]
    if kind == "insert":
        return word[:i] + rng.choice(letters) + word[i:]
    if kind == "swap" and i < len(word) - 1:
        return word[:i] + word[i + 1] + word[i] + word[i + 2 :]
    return word[:i] + rng.choice(letters) + word[i + 1 :]


def main() -> None:
    from spellrank.datasets.dictionary import load_frequency_dictionary
    from spellrank.postprocess.ranking import partial_match
    from spellrank.utils.metrics import RunningAverage

    args = _parse_args()
    trie = load_frequency_dictionary(Path(args.dictionary), progress=True)
    words = sorted(trie)
    if not words:
        raise SystemExit(f"No words loaded from {args.dictionary}")

    rng = random.Random(args.seed)
    sample = rng.sample(words, min(args.num_samples, len(words)))

    latency = RunningAverage()
    hits = RunningAverage()
    for word in tqdm(sample, desc="queries", unit="query"):
        typo = misspell(word, rng)
        start = time.perf_counter()
        results = partial_match(trie.root, typo, args.max_distance, args.max_results, prune=not args.no_prune)
        latency = latency.add((time.perf_counter() - start) * 1000.0)
        hits = hits.add(1.0 if any(c is not None and c.word == word for c in results) else 0.0)

    print(f"queries={latency.n} mean_latency_ms={latency.mean:.2f} hit@{args.max_results}={hits.mean:.4f}")


if __name__ == "__main__":
    main()
