#!/usr/bin/env python3
from __future__ import annotations

import argparse
import re
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from tqdm import tqdm

WORD_RE = re.compile(r"[a-z]+")


@dataclass(frozen=True)
class Args:
    corpus: list[str]
    output: str
    min_count: int
    min_length: int


def _parse_args() -> Args:
    p = argparse.ArgumentParser(
        description="Count words in local text files and write a word,count dictionary (most frequent first)."
    )
    p.add_argument("corpus", nargs="+", help="Text files to count.")
    p.add_argument("--output", required=True, help="Destination word,count file.")
    p.add_argument("--min-count", type=int, default=1, help="Drop words seen fewer times than this.")
    p.add_argument("--min-length", type=int, default=1, help="Drop words shorter than this.")
    a = p.parse_args()
    return Args(
        corpus=[str(c) for c in a.corpus],
        output=str(a.output),
        min_count=int(a.min_count),
        min_length=int(a.min_length),
    )


def count_words(paths: list[Path]) -> Counter[str]:
    counts: Counter[str] = Counter()
    for path in tqdm(paths, desc="corpus", unit="file"):
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            for line in f:
                counts.update(WORD_RE.findall(line.lower()))
    return counts


def main() -> None:
    args = _parse_args()
    counts = count_words([Path(c) for c in args.corpus])
    rows = [
        (w, c)
        for w, c in counts.most_common()
        if c >= args.min_count and len(w) >= args.min_length
    ]
    out = Path(args.output)
    out.write_text("".join(f"{w},{c}\n" for w, c in rows), encoding="utf-8")
    print(f"wrote {len(rows)} words to {out}")


if __name__ == "__main__":
    main()
