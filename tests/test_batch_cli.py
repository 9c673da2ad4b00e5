import csv
import json
import signal
from pathlib import Path

import pytest
from apps.cli import batch
from splitword.harness import CancelToken

WORDS = ["crane", "slate", "shine", "spine", "swine"]


@pytest.fixture
def words_file(tmp_path: Path) -> str:
    p = tmp_path / "words.json"
    p.write_text(json.dumps(WORDS), encoding="utf-8")
    return str(p)


def test_batch_prints_frequencies_and_writes_outputs(words_file, tmp_path: Path, capsys):
    outdir = tmp_path / "out"
    assert batch.main(["--file", words_file, "--progress", "off", "--outdir", str(outdir)]) == 0
    out = capsys.readouterr().out.splitlines()

    assert out[0].startswith("N=5 | words=5 ")
    assert "{1: 1, 2: 2, 3: 1, 4: 1}" in out
    assert any(line.startswith("games=5 | wins=5 (100.0%) | mean=2.40") for line in out)

    [csv_path] = outdir.glob("batch_*.csv")
    [manifest_path] = outdir.glob("batch_*_manifest.json")
    with csv_path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == WORDS
    assert rows[0]["rounds"] == "10"

    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    assert manifest["frequencies"] == {"1": 1, "2": 2, "3": 1, "4": 1}
    assert manifest["cancelled"] is False
    assert manifest["dictionary"]["passed"] is True


def test_batch_sample_is_seeded(words_file, capsys):
    assert batch.main(["--file", words_file, "--progress", "off", "--sample", "2"]) == 0
    first = capsys.readouterr().out
    assert batch.main(["--file", words_file, "--progress", "off", "--sample", "2"]) == 0
    second = capsys.readouterr().out
    assert "games=2 |" in first
    assert first == second


def test_batch_restores_sigint_handler(words_file, capsys):
    before = signal.getsignal(signal.SIGINT)
    batch.main(["--file", words_file, "--progress", "off"])
    assert signal.getsignal(signal.SIGINT) is before


def test_batch_without_words_of_length(words_file, capsys):
    assert batch.main(["--file", words_file, "--progress", "off", "--N", "6"]) == 1
    assert "No 6-letter words" in capsys.readouterr().err


def test_sigint_cancels_first_then_exits():
    token = CancelToken()
    previous = batch._install_sigint(token)
    try:
        first = signal.getsignal(signal.SIGINT)
        first(signal.SIGINT, None)
        assert token.cancelled

        second = signal.getsignal(signal.SIGINT)
        assert second is not first
        with pytest.raises(SystemExit) as exc:
            second(signal.SIGINT, None)
        assert exc.value.code == 1
    finally:
        signal.signal(signal.SIGINT, previous)
