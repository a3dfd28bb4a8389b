from __future__ import annotations

from pathlib import Path
from typing import Iterable

from spellrank.datasets.dictionary import load_word_list
from spellrank.utils.levenshtein import levenshtein


class LinearCorrector:
    """Plain edit-distance scan over a flat word list.

    For use when no prefix tree is available. ``source`` is either a word
    list file, read on first use, or the words themselves.
    """

    def __init__(self, source: Path | Iterable[str]):
        if isinstance(source, (str, Path)):
            self._path: Path | None = Path(source)
            self._words: list[str] | None = None
        else:
            self._path = None
            self._words = [w.strip().lower() for w in source if w and w.strip()]

    @classmethod
    def from_file(cls, path: str | Path) -> "LinearCorrector":
        return cls(Path(path))

    @property
    def words(self) -> list[str]:
        if self._words is None:
            self._words = load_word_list(self._path)
        return self._words

    def correct(self, word: str, max_distance: int) -> dict[str, int]:
        """Words within ``max_distance`` of ``word``, mapped to their distance.

        The budget tightens to each match's distance as the scan proceeds, so
        every later match is at least as close as the ones before it.
        """
        word = word.strip().lower()
        limit = max_distance
        matches: dict[str, int] = {}
        for candidate in self.words:
            d = levenshtein(word, candidate)
            if d <= limit:
                matches[candidate] = d
                limit = d
        return matches
