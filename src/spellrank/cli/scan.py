from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(help="Linear edit-distance scan over a flat word list (no trie, no ranking).")


@app.command("wordlist")
def scan_wordlist(
    word: str = typer.Argument(...),
    words: Path = typer.Option(..., exists=True, dir_okay=False, help="One word per line."),
    max_distance: int = typer.Option(2, min=0),
):
    """Print every word the scan accepts with its edit distance."""
    from spellrank.datasets.dictionary import DictionaryLoadError
    from spellrank.postprocess.linear import LinearCorrector

    corrector = LinearCorrector.from_file(words)
    try:
        matches = corrector.correct(word, max_distance)
    except DictionaryLoadError as e:
        raise typer.BadParameter(str(e), param_hint="--words") from e

    if not matches:
        typer.echo(f"no words within {max_distance} edits of {word!r}")
        raise typer.Exit(code=1)
    for w, d in sorted(matches.items(), key=lambda kv: (kv[1], kv[0])):
        typer.echo(f"{w}\t{d}")
