import json
from pathlib import Path

import pytest
from apps.cli import run, score

WORDS = ["crane", "slate", "shine", "spine", "swine"]


@pytest.fixture
def words_file(tmp_path: Path) -> str:
    p = tmp_path / "words.json"
    p.write_text(json.dumps(WORDS), encoding="utf-8")
    return str(p)


def _feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_run_simulated_quiet(words_file, capsys):
    assert run.main(["--file", words_file, "--quiet", "spine"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "3"
    assert out[-2].endswith(" spine")


def test_run_two_boards(words_file, capsys):
    assert run.main(["--file", words_file, "crane", "slate"]) == 0
    out = capsys.readouterr().out
    assert "Guessing crane" in out and "Guessing slate" in out
    assert "Board 2 (active)" in out
    assert out.rstrip().endswith("2")


def test_run_unknown_word(words_file, capsys):
    assert run.main(["--file", words_file, "zzzzz"]) == 1
    assert "Unknown word zzzzz" in capsys.readouterr().out


def test_run_interactive_reprompts_on_bad_feedback(words_file, monkeypatch, capsys):
    _feed(monkeypatch, ["0002", "00022", "22222"])
    assert run.main(["--file", words_file]) == 0
    captured = capsys.readouterr()
    assert "Guessing crane" in captured.out
    assert "Guessing shine" in captured.out
    assert "Please try again" in captured.err


def test_run_interactive_contradiction(words_file, monkeypatch, capsys):
    _feed(monkeypatch, ["00000"])
    assert run.main(["--file", words_file]) == 1
    assert "Word not known with constraints" in capsys.readouterr().err


def test_run_free_mode_uses_typed_guess(words_file, monkeypatch, capsys):
    # typed guess, then a blank line to accept the suggestion
    _feed(monkeypatch, ["slate", "", ""])
    assert run.main(["--file", words_file, "--free", "spine"]) == 0
    out = capsys.readouterr().out
    assert "Guessing slate" in out
    assert out.splitlines()[-1] == "3"


def test_run_rejects_answer_count_mismatch(words_file):
    with pytest.raises(SystemExit):
        run.main(["--file", words_file, "--boards", "2", "spine"])


def test_score_prints_known(capsys):
    assert score.main(["spine", "crane"]) == 0
    out = capsys.readouterr().out
    assert "⬜⬜⬜🟩🟩 crane" in out
    assert "Known ...ne" in out


@pytest.mark.parametrize("entries", [
    ["crane", "abcdefg", "slate", "shine", "spine", "swine"],
    ["abcdefg", "crane", "slate", "shine", "spine", "swine"],
])
def test_run_skips_entries_of_other_lengths(tmp_path: Path, capsys, entries):
    p = tmp_path / "words.json"
    p.write_text(json.dumps(entries), encoding="utf-8")
    assert run.main(["--file", str(p), "--quiet", "spine"]) == 0
    captured = capsys.readouterr()
    assert "Skipping 1 entries that are not 5 letters" in captured.err
    assert captured.out.splitlines()[-1] == "3"


def test_run_rejects_zero_boards(words_file):
    with pytest.raises(SystemExit) as exc:
        run.main(["--file", words_file, "--boards", "0"])
    assert exc.value.code == 2
