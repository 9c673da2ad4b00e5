from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_entries(p: Path | str) -> List[str]:
    """
    Raw dictionary entries: a JSON array for *.json files, otherwise one entry
    per line. No cleaning beyond what the format needs.
    """
    p = Path(p)
    if p.suffix.lower() != ".json":
        return read_lines(p)
    if not p.exists():
        raise FileNotFoundError(p)
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, list) or not all(isinstance(w, str) for w in data):
        raise ValueError(f"{p}: expected a JSON array of strings")
    return data


def load_words(p: Path | str) -> List[str]:
    """Dictionary words, lowercased, blanks dropped, file order kept."""
    return [w.strip().lower() for w in read_entries(p) if w.strip()]


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write a word list as a JSON array (*.json) or one word per line.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    words = list(words)
    if p.suffix.lower() == ".json":
        p.write_text(json.dumps(words) + "\n", encoding="utf-8")
    else:
        p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)
