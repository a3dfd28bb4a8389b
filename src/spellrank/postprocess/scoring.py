from __future__ import annotations

import math
import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path

from spellrank.postprocess.candidates import Candidate
from spellrank.utils.config import ConfigError, load_yaml
from spellrank.utils.keyboard import QWERTY, KeyboardLayout
from spellrank.utils.strings import prefix_length, shared_characters, suffix_length


MAX_WEIGHT = sys.float_info.max


@dataclass(frozen=True)
class ScoringWeights:
    """Coefficients of the ranking formula.

    ``distance`` .. ``keyboard`` scale penalties, ``prefix`` .. ``frequency``
    scale bonuses; the weight is ``(1 + bonus) / (1 + penalty)``.
    """

    distance: float = 1.0
    substitution: float = 0.5
    insert_delete: float = 0.5
    transposition: float = 0.25
    keyboard: float = 0.2
    prefix: float = 0.5
    suffix: float = 0.3
    shared: float = 0.2
    frequency: float = 0.1

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"Scoring weight {f.name!r} must be a finite non-negative number, got {value!r}")


def load_scoring_weights(path: Path) -> ScoringWeights:
    cfg = load_yaml(path)
    raw = cfg.get("weights", cfg)
    if not isinstance(raw, dict):
        raise ConfigError(f"'weights' in {path} must be a mapping")
    known = {f.name for f in fields(ScoringWeights)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown scoring weights in {path}: {', '.join(map(str, unknown))}")
    try:
        return ScoringWeights(**{k: float(v) for k, v in raw.items()})
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid scoring weights in {path}: {e}") from e


class Scorer:
    def __init__(self, weights: ScoringWeights = ScoringWeights(), layout: KeyboardLayout = QWERTY):
        self.weights = weights
        self.layout = layout

    def keyboard_length(self, word: str, query: str) -> int:
        """Summed key distance over the overlap plus the length difference."""
        total = sum(self.layout.proximity(a, b) for a, b in zip(word, query))
        return total + abs(len(word) - len(query))

    def score(self, candidate: Candidate, query: str) -> Candidate:
        word = candidate.word
        prefix_len = prefix_length(word, query)
        suffix_len = suffix_length(word, query)
        keyboard_len = self.keyboard_length(word, query)
        shared_chars = shared_characters(word, query)

        if word == query:
            weight = MAX_WEIGHT
        else:
            w = self.weights
            d = candidate.distance
            penalty = (
                w.distance * d.total
                + w.substitution * d.substitutions
                + w.insert_delete * d.insert_deletes
                + w.transposition * d.transpositions
                + w.keyboard * keyboard_len
            )
            bonus = (
                w.prefix * prefix_len
                + w.suffix * suffix_len
                + w.shared * shared_chars
                + w.frequency * math.log1p(max(candidate.frequency, 0))
            )
            weight = (1.0 + bonus) / (1.0 + penalty)

        return replace(
            candidate,
            prefix_len=prefix_len,
            suffix_len=suffix_len,
            keyboard_len=keyboard_len,
            shared_chars=shared_chars,
            weight=weight,
        )


default_scorer = Scorer()


def score(candidate: Candidate, query: str, weights: ScoringWeights | None = None) -> Candidate:
    scorer = default_scorer if weights is None else Scorer(weights)
    return scorer.score(candidate, query)
