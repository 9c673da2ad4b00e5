import json
from pathlib import Path
from splitword.datasets import load_words, pretty_summary, validate_dictionary, write_words


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_dictionary_happy_path_json(tmp_path: Path):
    words = tmp_path / "words.json"
    words.write_text(json.dumps(["crane", "raise", "stare"]), encoding="utf-8")

    rep = validate_dictionary(str(words), 5)
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_dictionary_flags_errors(tmp_path: Path):
    # 'raiser' (len 6) invalid for N=5, '???' invalid chars, 'Crane' not lowercase
    words = tmp_path / "words.txt"
    _write(words, ["crane", "raiser", "???", "Crane", "stare"])

    rep = validate_dictionary(str(words), 5)
    assert rep["passed"] is False
    assert rep["invalid_entries"] == 3
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_dictionary_duplicates(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["crane", "stare", "crane"])

    rep = validate_dictionary(str(words), 5)
    assert rep["passed"] is False
    assert rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_dictionary_missing_or_malformed(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "nope.json"), 5)
    assert rep["exists"] is False and rep["passed"] is False

    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"words": ["crane"]}), encoding="utf-8")
    rep = validate_dictionary(str(bad), 5)
    assert rep["passed"] is False
    assert any("unreadable" in msg for msg in rep["issues"])


def test_load_words_normalizes(tmp_path: Path):
    txt = tmp_path / "words.txt"
    _write(txt, ["Crane", "", "  slate  "])
    assert load_words(txt) == ["crane", "slate"]


def test_write_words_round_trips_both_formats(tmp_path: Path):
    for name in ("out.json", "out.txt"):
        p = write_words(["crane", "slate"], tmp_path / name)
        assert load_words(p) == ["crane", "slate"]
    assert json.loads((tmp_path / "out.json").read_text(encoding="utf-8")) == ["crane", "slate"]
