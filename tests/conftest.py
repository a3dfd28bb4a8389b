from __future__ import annotations

from pathlib import Path

import pytest

from spellrank.datasets.trie import Trie

# Insertion order matters: children are walked in insertion order.
WORDS = [
    ("spelling", "5000"),
    ("spewing", "20"),
    ("selling", "300"),
    ("smelling", "100"),
    ("bicycle", "800"),
    ("bad", "200"),
    ("tad", "15"),
    ("cycle", "600"),
    ("convenient", "900"),
    ("recycle", "250"),
    ("receive", "700"),
    ("inconvenient", "400"),
    ("incontinent", "30"),
    ("the", "90000"),
]


@pytest.fixture
def dictionary_path(tmp_path) -> Path:
    p = tmp_path / "dictionary.txt"
    p.write_text("".join(f"{w},{f}\n" for w, f in WORDS), encoding="utf-8")
    return p


@pytest.fixture
def trie() -> Trie:
    return Trie().build(WORDS)
