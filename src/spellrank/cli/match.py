from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Sequence

import typer

app = typer.Typer(help="Ranked corrections from a frequency dictionary.")

HEADERS = (
    "Rank",
    "Correction",
    "Weight",
    "Levenshtein",
    "Ins/Del",
    "Subs",
    "Transpositions",
    "Frequency",
    "Shared",
    "Prefix",
    "Suffix",
    "Keyboard",
)


def _format_weight(weight: float) -> str:
    from spellrank.postprocess.scoring import MAX_WEIGHT

    return "exact" if weight >= MAX_WEIGHT else f"{weight:.4f}"


def format_results(results: Sequence) -> str:
    rows: list[tuple[str, ...]] = []
    for rank, cand in enumerate(results, start=1):
        if cand is None:
            continue
        m = cand.metrics()
        rows.append(
            (
                str(rank),
                cand.word,
                _format_weight(cand.weight),
                str(m["levenshtein"]),
                str(m["ins/del"]),
                str(m["subs"]),
                str(m["transpositions"]),
                str(m["frequency"]),
                str(m["shared-characters"]),
                str(m["prefix-length"]),
                str(m["suffix-length"]),
                str(m["keyboard-length"]),
            )
        )
    widths = [len(h) for h in HEADERS]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]
    lines = ["  ".join(h.ljust(w) for h, w in zip(HEADERS, widths))]
    lines.append("  ".join("-" * w for w in widths))
    lines.extend("  ".join(cell.ljust(w) for cell, w in zip(row, widths)) for row in rows)
    return "\n".join(line.rstrip() for line in lines)


def load_dictionary(dictionary: Path, weights: Path | None):
    from spellrank.datasets.dictionary import DictionaryLoadError, load_frequency_dictionary
    from spellrank.postprocess.scoring import ScoringWeights, load_scoring_weights
    from spellrank.utils.config import ConfigError

    try:
        trie = load_frequency_dictionary(dictionary, progress=True)
    except DictionaryLoadError as e:
        raise typer.BadParameter(str(e), param_hint="--dictionary") from e
    try:
        w = load_scoring_weights(weights) if weights is not None else ScoringWeights()
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint="--weights") from e
    return trie, w


@app.command("prompt")
def match_prompt(
    dictionary: Path = typer.Option(..., exists=True, dir_okay=False, help="word,frequency file."),
    max_distance: int = typer.Option(10, min=0),
    max_results: int = typer.Option(10, min=1),
    weights: Path = typer.Option(None, exists=True, dir_okay=False, help="YAML scoring weights."),
    inner_words: bool = typer.Option(False, help="Also match words that prefix other words."),
):
    """Read words from stdin and print a ranked table for each."""
    from spellrank.postprocess.ranking import partial_match

    start = time.perf_counter()
    trie, w = load_dictionary(dictionary, weights)
    typer.echo(f"loaded dictionary in {(time.perf_counter() - start) * 1000.0:.0f}ms")

    while True:
        try:
            line = input("spell>> ")
        except EOFError:
            return
        word = line.strip()
        if not word:
            continue
        start = time.perf_counter()
        results = partial_match(
            trie.root, word, max_distance, max_results, weights=w, include_inner_words=inner_words
        )
        elapsed = (time.perf_counter() - start) * 1000.0
        typer.echo(format_results(results))
        typer.echo(f"\nresults generated in {elapsed:.0f}ms")


@app.command("query")
def match_query(
    word: str = typer.Argument(...),
    dictionary: Path = typer.Option(..., exists=True, dir_okay=False, help="word,frequency file."),
    max_distance: int = typer.Option(2, min=0),
    max_results: int = typer.Option(10, min=1),
    weights: Path = typer.Option(None, exists=True, dir_okay=False, help="YAML scoring weights."),
    inner_words: bool = typer.Option(False, help="Also match words that prefix other words."),
    output_json: Path = typer.Option(None, dir_okay=False),
):
    """Rank corrections for a single word."""
    from spellrank.postprocess.ranking import partial_match
    from spellrank.postprocess.scoring import MAX_WEIGHT

    trie, w = load_dictionary(dictionary, weights)
    results = partial_match(
        trie.root, word, max_distance, max_results, weights=w, include_inner_words=inner_words
    )
    typer.echo(format_results(results))

    if output_json is not None:
        obj = {
            "query": word,
            "max_distance": max_distance,
            "results": [
                {"word": c.word, "weight": c.weight, "exact": c.weight >= MAX_WEIGHT, **c.metrics()}
                for c in results
                if c is not None
            ],
        }
        output_json.write_text(json.dumps(obj, indent=2), encoding="utf-8")
