from dataclasses import replace
from pathlib import Path

import pytest

from spellrank.postprocess.candidates import Candidate
from spellrank.postprocess.scoring import (
    MAX_WEIGHT,
    Scorer,
    ScoringWeights,
    load_scoring_weights,
    score,
)
from spellrank.utils.config import ConfigError
from spellrank.utils.levenshtein import EditOperations, levenshtein_operations

CONFIGS = Path(__file__).resolve().parents[1] / "configs"


def _raw(word: str, query: str, frequency: int = 0) -> Candidate:
    return Candidate(word=word, distance=levenshtein_operations(word, query), frequency=frequency)


def test_exact_match_gets_max_weight():
    scored = score(_raw("spelling", "spelling"), "spelling")
    assert scored.weight == MAX_WEIGHT
    assert scored.prefix_len == 8


def test_fields_completed():
    scored = score(_raw("spelling", "speling", 5000), "speling")
    assert scored.word == "spelling"
    assert scored.frequency == 5000
    assert scored.prefix_len == 4
    assert scored.suffix_len == 4
    assert scored.shared_chars == 4
    assert scored.keyboard_len == 5
    assert 0.0 < scored.weight < MAX_WEIGHT


def test_keyboard_length():
    s = Scorer()
    assert s.keyboard_length("bad", "vad") == 1
    assert s.keyboard_length("cat", "cats") == 1
    assert s.keyboard_length("", "abc") == 3


def test_closer_key_ranks_higher():
    # same edit distance; b sits next to v, t does not
    bad = score(_raw("bad", "vad"), "vad")
    tad = score(_raw("tad", "vad"), "vad")
    assert bad.weight > tad.weight


def test_weight_monotonic_in_each_signal():
    base = score(_raw("bicycle", "bycycle", 10), "bycycle")

    more_frequent = score(replace(_raw("bicycle", "bycycle"), frequency=1000), "bycycle")
    assert more_frequent.weight > base.weight

    farther = score(
        replace(_raw("bicycle", "bycycle", 10), distance=EditOperations(total=2, substitutions=2)),
        "bycycle",
    )
    assert farther.weight < base.weight


def test_signal_coefficients_direction():
    raw = _raw("recycle", "bycycle", 10)
    base = Scorer(ScoringWeights()).score(raw, "bycycle").weight
    assert Scorer(ScoringWeights(keyboard=1.0)).score(raw, "bycycle").weight < base
    assert Scorer(ScoringWeights(suffix=1.0)).score(raw, "bycycle").weight > base
    assert Scorer(ScoringWeights(shared=1.0)).score(raw, "bycycle").weight > base


def test_negative_weight_rejected():
    with pytest.raises(ValueError):
        ScoringWeights(prefix=-1.0)
    with pytest.raises(ValueError):
        ScoringWeights(keyboard=float("nan"))


def test_shipped_weights_match_defaults():
    assert load_scoring_weights(CONFIGS / "weights.yaml") == ScoringWeights()


def test_load_flat_weights(tmp_path):
    p = tmp_path / "w.yaml"
    p.write_text("keyboard: 0.5\nfrequency: 2\n", encoding="utf-8")
    w = load_scoring_weights(p)
    assert w.keyboard == 0.5
    assert w.frequency == 2.0
    assert w.prefix == ScoringWeights().prefix


def test_load_weights_rejects_unknown_keys(tmp_path):
    p = tmp_path / "w.yaml"
    p.write_text("weights:\n  keyboard: 0.5\n  vibes: 3\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="vibes"):
        load_scoring_weights(p)


def test_load_weights_rejects_bad_values(tmp_path):
    p = tmp_path / "w.yaml"
    p.write_text("weights:\n  keyboard: -2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_scoring_weights(p)
