from __future__ import annotations

import logging

import typer

from spellrank.cli import eval as eval_cmd
from spellrank.cli import match as match_cmd
from spellrank.cli import scan as scan_cmd

app = typer.Typer(help="Fuzzy spelling correction over a frequency dictionary.")

app.add_typer(match_cmd.app, name="match")
app.add_typer(scan_cmd.app, name="scan")
app.add_typer(eval_cmd.app, name="eval")


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", help="DEBUG, INFO, WARNING or ERROR."),
):
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
