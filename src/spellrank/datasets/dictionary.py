"""Dictionary file loading.

Frequency dictionaries are plain text, one ``word,payload`` per line, where
the payload is normally the word's corpus count. Flat word lists hold one
word per line.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterator

from tqdm import tqdm

from spellrank.datasets.trie import Trie

logger = logging.getLogger(__name__)


class DictionaryLoadError(OSError):
    """A dictionary or word list could not be read."""


def parse_frequency(payload: bytes | str | None) -> int:
    """Integer frequency from a trie payload; anything non-numeric is 0."""
    if payload is None:
        return 0
    try:
        return int(payload)
    except (TypeError, ValueError):
        logger.debug("non-numeric frequency payload %r, using 0", payload)
        return 0


def _read_lines(path: Path) -> list[str]:
    try:
        return Path(path).read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"Cannot load dictionary {path}: {e}") from e


def iter_frequency_entries(lines: list[str]) -> Iterator[tuple[str, bytes]]:
    for line in lines:
        line = line.strip()
        if not line:
            continue
        word, _, payload = line.partition(",")
        word = word.strip()
        if not word:
            continue
        yield word, payload.strip().encode("utf-8")


def load_frequency_dictionary(path: Path, progress: bool = False) -> Trie:
    start = time.perf_counter()
    lines = _read_lines(path)
    trie = Trie()
    entries = iter_frequency_entries(lines)
    for word, payload in tqdm(entries, total=len(lines), desc="dictionary", unit="word", disable=not progress):
        trie.insert(word, payload)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.info("loaded %s words from %s in %.0fms", len(trie), path, elapsed_ms)
    return trie


def load_word_list(path: Path) -> list[str]:
    words = [w.strip().lower() for w in _read_lines(path)]
    words = [w for w in words if w]
    logger.info("loaded %s words from %s", len(words), path)
    return words
