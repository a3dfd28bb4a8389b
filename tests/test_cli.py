import json

from typer.testing import CliRunner

from spellrank.cli.main import app

runner = CliRunner()


def test_match_query(dictionary_path, tmp_path):
    out_json = tmp_path / "out.json"
    result = runner.invoke(
        app,
        ["match", "query", "speling", "--dictionary", str(dictionary_path), "--output-json", str(out_json)],
    )
    assert result.exit_code == 0, result.output
    assert "spelling" in result.output
    obj = json.loads(out_json.read_text(encoding="utf-8"))
    assert obj["query"] == "speling"
    assert obj["results"][0]["word"] == "spelling"
    assert obj["results"][0]["levenshtein"] == 1
    assert isinstance(obj["results"][0]["weight"], float)
    assert obj["results"][0]["exact"] is False


def test_match_query_json_marks_exact_match(dictionary_path, tmp_path):
    out_json = tmp_path / "out.json"
    result = runner.invoke(
        app,
        ["match", "query", "spelling", "--dictionary", str(dictionary_path), "--output-json", str(out_json)],
    )
    assert result.exit_code == 0, result.output
    top = json.loads(out_json.read_text(encoding="utf-8"))["results"][0]
    assert top["word"] == "spelling"
    assert top["exact"] is True
    assert top["weight"] > 1e300


def test_match_query_with_weights_file(dictionary_path, tmp_path):
    weights = tmp_path / "w.yaml"
    weights.write_text("weights:\n  bogus: 1\n", encoding="utf-8")
    result = runner.invoke(
        app, ["match", "query", "speling", "--dictionary", str(dictionary_path), "--weights", str(weights)]
    )
    assert result.exit_code != 0


def test_match_prompt(dictionary_path):
    result = runner.invoke(
        app,
        ["match", "prompt", "--dictionary", str(dictionary_path), "--max-distance", "2"],
        input="bycycle\n\n",
    )
    assert result.exit_code == 0, result.output
    assert "loaded dictionary" in result.output
    assert "bicycle" in result.output
    assert "results generated in" in result.output


def test_match_rejects_zero_results(dictionary_path):
    result = runner.invoke(
        app, ["match", "query", "speling", "--dictionary", str(dictionary_path), "--max-results", "0"]
    )
    assert result.exit_code != 0


def test_scan_wordlist(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("bad\ntad\ncat\n", encoding="utf-8")
    result = runner.invoke(app, ["scan", "wordlist", "vad", "--words", str(words), "--max-distance", "2"])
    assert result.exit_code == 0, result.output
    assert "bad\t1" in result.output
    assert "tad\t1" in result.output
    assert "cat" not in result.output


def test_scan_wordlist_no_match(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("apple\n", encoding="utf-8")
    result = runner.invoke(app, ["scan", "wordlist", "zzz", "--words", str(words), "--max-distance", "1"])
    assert result.exit_code == 1


def test_eval_regression(dictionary_path, tmp_path):
    cases = tmp_path / "cases.yaml"
    cases.write_text(
        "max_distance: 2\nmax_results: 10\ncases:\n"
        "  - {query: speling, expected: spelling}\n"
        "  - {query: bycycle, expected: bicycle}\n"
        "  - {query: inconvient, expected: inconvenient}\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["eval", "regression", "--dictionary", str(dictionary_path), "--cases", str(cases)])
    assert result.exit_code == 0, result.output
    assert "hit@10=1.0000 mrr=1.0000 over 3 cases" in result.output


def test_eval_regression_rejects_incomplete_case(dictionary_path, tmp_path):
    cases = tmp_path / "cases.yaml"
    cases.write_text("cases:\n  - {query: speling}\n", encoding="utf-8")
    result = runner.invoke(app, ["eval", "regression", "--dictionary", str(dictionary_path), "--cases", str(cases)])
    assert result.exit_code == 2
    assert not isinstance(result.exception, KeyError)
