import csv
import json
import re
from pathlib import Path

from splitword.harness import GameConfig
from splitword.harness.io import git_commit, run_id, write_csv, write_run

RESULTS = [
    {"answer": "spine", "success": True, "guesses": 3, "time_ms": 1.23456,
     "history": [("crane", "---GG"), ("shine", "G-GGG"), ("spine", "GGGGG")]},
    {"answer": "crane", "success": True, "guesses": 1, "time_ms": 0.5,
     "history": [("crane", "GGGGG")]},
]


def test_write_csv_one_column_pair_per_round(tmp_path: Path):
    config = GameConfig(rounds=4, hard_mode=True)
    out = write_csv(RESULTS, str(tmp_path / "runs" / "games.csv"), config)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))

    assert len(rows) == 2
    assert list(rows[0])[-2:] == ["guess_4", "patt_4"]
    assert rows[0]["rounds"] == "4" and rows[0]["hard_mode"] == "True"
    assert rows[0]["guess_2"] == "shine"
    assert rows[0]["patt_1"] == "'---GG"
    assert rows[0]["time_ms"] == "1.235"
    assert rows[1]["guess_2"] == "" and rows[1]["patt_4"] == ""


def test_write_run_manifest(tmp_path: Path):
    csv_path, manifest_path = write_run(
        str(tmp_path), RESULTS, GameConfig(rounds=10),
        dictionary={"count": 5}, extra={"seed": 7},
    )
    assert Path(csv_path).exists()
    manifest = json.loads(Path(manifest_path).read_text(encoding="utf-8"))
    assert manifest["config"]["rounds"] == 10
    assert manifest["frequencies"] == {"1": 1, "3": 1}
    assert manifest["stats"]["games"] == 2
    assert manifest["dictionary"] == {"count": 5}
    assert manifest["seed"] == 7
    assert manifest["cancelled"] is False
    assert Path(csv_path).name == f"batch_{manifest['run_id']}.csv"


def test_run_id_format():
    assert re.fullmatch(r"\d{8}T\d{6}Z", run_id())


def test_git_commit_outside_repo(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert git_commit() == "unknown"
