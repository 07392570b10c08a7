import json

import pytest
from typer.testing import CliRunner

from s2 import app

runner = CliRunner()


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("The cat sat. The dog ran. The cat ran fast.", encoding="utf-8")
    return str(path)


def test_rank(text_file):
    result = runner.invoke(app, ["rank", text_file, "--q", "cat runs"])
    assert result.exit_code == 0
    assert "The cat sat" in result.output
    assert "The cat ran fast" in result.output
    assert "The dog ran" not in result.output
    assert "2 of 3 sentences matched" in result.output


def test_rank_top_override(text_file):
    result = runner.invoke(app, ["rank", text_file, "--q", "cat runs", "--top", "1"])
    assert result.exit_code == 0
    assert "1 of 3 sentences matched" in result.output


def test_rank_requires_query(text_file):
    result = runner.invoke(app, ["rank", text_file])
    assert result.exit_code == 1


def test_rank_rejects_bad_config(text_file, tmp_path):
    config = tmp_path / "bad.json"
    config.write_text(json.dumps({"name": "x", "ranking": {"top_n": -2}}))
    result = runner.invoke(app, ["rank", text_file, "--q", "cat", "--config", str(config)])
    assert result.exit_code == 1
    assert "Invalid config" in result.output


def test_missing_text_file(tmp_path):
    result = runner.invoke(app, ["info", str(tmp_path / "nope.txt")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_stats(tmp_path):
    path = tmp_path / "run.txt"
    path.write_text("I am running. He was running too.", encoding="utf-8")
    result = runner.invoke(app, ["stats", str(path), "running"])
    assert result.exit_code == 0
    assert "runn" in result.output
    assert "0.2857" in result.output
    assert "1.0000" in result.output


def test_similarity(text_file):
    result = runner.invoke(app, ["similarity", text_file, "the cat sat", "The cat sat"])
    assert result.exit_code == 0
    assert "1.0000" in result.output


def test_info(text_file):
    result = runner.invoke(app, ["info", text_file])
    assert result.exit_code == 0
    assert "Sentences" in result.output
    assert "Distinct stems" in result.output


def test_validate(tmp_path):
    good = tmp_path / "good.json"
    good.write_text(json.dumps({"name": "x", "ranking": {"top_n": 3}}))
    assert runner.invoke(app, ["validate", str(good)]).exit_code == 0

    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"name": "x", "ranking": {"top_n": -1}}))
    result = runner.invoke(app, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "Validation failed" in result.output


def test_validate_accepts_partial_config(tmp_path):
    partial = tmp_path / "partial.json"
    partial.write_text(json.dumps({"name": "x"}))
    assert runner.invoke(app, ["validate", str(partial)]).exit_code == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"output": None},
        {"ranking": {"preview_chars": None}},
        {"output": {"precision": None}},
    ],
)
def test_rank_rejects_null_config_values(text_file, tmp_path, payload):
    config = tmp_path / "nulls.json"
    config.write_text(json.dumps(payload))
    result = runner.invoke(app, ["rank", text_file, "--q", "cat", "--config", str(config)])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Invalid config" in result.output


def test_non_utf8_text_file(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("café crème".encode("latin-1"))
    result = runner.invoke(app, ["info", str(path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "not valid UTF-8" in result.output
