from __future__ import annotations

from pathlib import Path

import typer


app = typer.Typer(help="Evaluation utilities.")


@app.command("regression")
def eval_regression(
    dictionary: Path = typer.Option(..., exists=True, dir_okay=False),
    cases: Path = typer.Option(..., exists=True, dir_okay=False, help="YAML with a 'cases' list of {query, expected}."),
    weights: Path = typer.Option(None, exists=True, dir_okay=False),
    max_distance: int = typer.Option(None, min=0, help="Overrides the value in the cases file."),
    max_results: int = typer.Option(None, min=1, help="Overrides the value in the cases file."),
):
    """Report top-K hit rate and mean reciprocal rank over known misspellings."""
    from spellrank.cli.match import load_dictionary
    from spellrank.postprocess.ranking import partial_match
    from spellrank.utils.config import ConfigError, load_yaml
    from spellrank.utils.metrics import RunningAverage, reciprocal_rank

    try:
        cfg = load_yaml(cases)
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint="--cases") from e
    items = cfg.get("cases", [])
    if not items:
        raise typer.BadParameter("no cases defined", param_hint="--cases")
    max_distance = int(cfg.get("max_distance", 2)) if max_distance is None else max_distance
    max_results = int(cfg.get("max_results", 10)) if max_results is None else max_results

    pairs: list[tuple[str, str]] = []
    for i, item in enumerate(items):
        query = item.get("query") if isinstance(item, dict) else None
        expected = item.get("expected") if isinstance(item, dict) else None
        if query is None or expected is None:
            raise typer.BadParameter(f"case {i} needs both 'query' and 'expected'", param_hint="--cases")
        pairs.append((str(query), str(expected).lower()))

    trie, w = load_dictionary(dictionary, weights)

    hits = RunningAverage()
    mrr = RunningAverage()
    for query, expected in pairs:
        results = partial_match(trie.root, query, max_distance, max_results, weights=w)
        ranked = [c.word if c is not None else None for c in results]
        rr = reciprocal_rank(ranked, expected)
        hits = hits.add(1.0 if rr > 0 else 0.0)
        mrr = mrr.add(rr)
        status = "ok" if rr > 0 else "MISS"
        top = ranked[0] or "-"
        typer.echo(f"{status:4} {query} -> {expected} (top: {top}, rr={rr:.3f})")

    typer.echo(f"hit@{max_results}={hits.mean:.4f} mrr={mrr.mean:.4f} over {hits.n} cases")
