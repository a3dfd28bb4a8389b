from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from spellrank.datasets.dictionary import parse_frequency
from spellrank.datasets.trie import TrieNode
from spellrank.utils.levenshtein import (
    EditOperations,
    levenshtein_operations,
    osa_first_row,
    osa_next_row,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """A possible correction for a query word.

    The generator fills ``word``, ``distance`` and ``frequency``; the scorer
    returns a copy with the remaining ranking signals and ``weight`` set.
    """

    word: str
    distance: EditOperations
    frequency: int = 0
    prefix_len: int = 0
    suffix_len: int = 0
    keyboard_len: int = 0
    shared_chars: int = 0
    weight: float = 0.0

    def metrics(self) -> dict[str, int | float]:
        return {
            "levenshtein": self.distance.total,
            "ins/del": self.distance.insert_deletes,
            "subs": self.distance.substitutions,
            "transpositions": self.distance.transpositions,
            "frequency": self.frequency,
            "shared-characters": self.shared_chars,
            "prefix-length": self.prefix_len,
            "suffix-length": self.suffix_len,
            "keyboard-length": self.keyboard_len,
        }


def generate_candidates(
    root: TrieNode,
    query: str,
    max_distance: int,
    *,
    prune: bool = True,
    include_inner_words: bool = False,
) -> Iterator[Candidate]:
    """Yield every dictionary word within ``max_distance`` edits of ``query``.

    Depth-first over the prefix tree starting below ``root``. Only leaves
    (terminal nodes without children) are evaluated unless
    ``include_inner_words`` is set. With ``prune`` an incremental
    alignment row is carried along each path and a subtree is skipped once
    no word below it can come within ``max_distance``; the yielded set is the
    same either way.
    """
    path: list[str] = []
    rows: list[list[int]] = [osa_first_row(query)] if prune else []
    stack: list[tuple[str, TrieNode, int]] = [
        (ch, child, 1) for ch, child in reversed(list(root.children.items()))
    ]
    visited = pruned = emitted = 0

    while stack:
        ch, node, depth = stack.pop()
        visited += 1
        del path[depth - 1 :]
        path.append(ch)

        if prune:
            del rows[depth:]
            prev_prev = rows[depth - 2] if depth >= 2 else None
            prev_ch = path[depth - 2] if depth >= 2 else None
            row = osa_next_row(rows[depth - 1], prev_prev, ch, prev_ch, query)
            # lower bound on the distance of every word below this node
            bound = min(min(row), min(rows[depth - 1]) + 1)
            rows.append(row)
            if bound > max_distance:
                pruned += 1
                continue

        if node.is_terminal and (include_inner_words or not node.children):
            word = "".join(path)
            ops = levenshtein_operations(word, query)
            if ops.total <= max_distance:
                emitted += 1
                yield Candidate(word=word, distance=ops, frequency=parse_frequency(node.payload))

        for child_ch, child in reversed(list(node.children.items())):
            stack.append((child_ch, child, depth + 1))

    logger.debug(
        "query=%r max_distance=%s visited=%s pruned=%s candidates=%s",
        query,
        max_distance,
        visited,
        pruned,
        emitted,
    )
