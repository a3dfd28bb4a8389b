from __future__ import annotations

import logging
from typing import Iterable

from spellrank.datasets.trie import TrieNode
from spellrank.postprocess.candidates import Candidate, generate_candidates
from spellrank.postprocess.scoring import Scorer, ScoringWeights, default_scorer

logger = logging.getLogger(__name__)

# Result slots are None until filled; a zero-weight Candidate is a real result.
ResultBuffer = list[Candidate | None]


def _sort_desc(filled: list[Candidate]) -> None:
    filled.sort(key=lambda c: c.weight, reverse=True)


def select_top_k(
    candidates: Iterable[Candidate],
    query: str,
    capacity: int,
    max_distance: int,
    scorer: Scorer | None = None,
) -> ResultBuffer:
    """Score ``candidates`` against ``query`` and keep the best ``capacity``.

    The weight of the first candidate becomes the acceptance threshold for
    the rest of the stream. Once the buffer is full a newcomer must beat the
    lowest-weighted entry (and be within ``max_distance``) to replace it.
    """
    if capacity < 1:
        raise ValueError(f"capacity must be >= 1, got {capacity}")
    scorer = scorer or default_scorer

    filled: list[Candidate] = []
    threshold: float | None = None
    seen = 0
    for raw in candidates:
        cand = scorer.score(raw, query)
        seen += 1
        if threshold is None:
            threshold = cand.weight
        if cand.weight < threshold:
            continue

        if len(filled) < capacity:
            filled.append(cand)
            _sort_desc(filled)
            continue

        lowest = min(range(len(filled)), key=lambda i: filled[i].weight)
        if cand.weight > filled[lowest].weight and cand.distance.total <= max_distance:
            filled[lowest] = cand
            _sort_desc(filled)

    logger.debug("query=%r scored=%s kept=%s capacity=%s", query, seen, len(filled), capacity)
    out: ResultBuffer = list(filled)
    out.extend([None] * (capacity - len(filled)))
    return out


def partial_match(
    root: TrieNode,
    query: str,
    max_distance: int,
    max_results: int,
    *,
    weights: ScoringWeights | None = None,
    prune: bool = True,
    include_inner_words: bool = False,
) -> ResultBuffer:
    """Best ``max_results`` corrections for ``query`` from the tree under ``root``.

    The result always has ``max_results`` slots, descending by weight, with
    ``None`` in the slots no candidate reached.
    """
    query = query.strip().lower()
    scorer = default_scorer if weights is None else Scorer(weights)
    stream = generate_candidates(
        root,
        query,
        max_distance,
        prune=prune,
        include_inner_words=include_inner_words,
    )
    return select_top_k(stream, query, max_results, max_distance, scorer=scorer)
