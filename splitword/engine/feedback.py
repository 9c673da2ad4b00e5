"""
Wordle-style feedback for a single (guess, solution) pair.

Conventions:
  - CORRECT   : green  = letter in the right position          ('G', 🟩)
  - MISPLACED : yellow = letter present, but somewhere else     ('Y', 🟨)
  - ABSENT    : gray   = letter not present (or present fewer times than guessed)

Algorithm (two-pass, duplicate-safe):
  1) First pass counts the solution letters that are NOT matched in place
     ("unclaimed" occurrences).
  2) Second pass, left to right, emits CORRECT on a positional match, otherwise
     MISPLACED while an unclaimed occurrence of that letter remains, otherwise
     ABSENT. Leftmost positions claim MISPLACED credit first.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import List, Sequence


class LetterResult(Enum):
    CORRECT = "G"
    MISPLACED = "Y"
    ABSENT = "-"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    LetterResult.CORRECT: "🟩",
    LetterResult.MISPLACED: "🟨",
    LetterResult.ABSENT: "⬜",
}


def evaluate(guess: str, solution: str) -> List[LetterResult]:
    """
    Classify every letter of `guess` against `solution`.

    Examples:
      pattern_string(evaluate("belle", "level")) -> "-GYYY"
      pattern_string(evaluate("speed", "erase")) -> "Y-YY-"
    """
    if len(guess) != len(solution):
        raise ValueError(f"guess {guess!r} and solution {solution!r} differ in length")

    # Pass 1: letters of the solution still available for yellow credit.
    unclaimed: Counter[str] = Counter()
    for g, s in zip(guess, solution):
        if g != s:
            unclaimed[s] += 1

    # Pass 2: greens first by position, then yellows while credit remains.
    results: List[LetterResult] = []
    for g, s in zip(guess, solution):
        if g == s:
            results.append(LetterResult.CORRECT)
        elif unclaimed[g] > 0:
            unclaimed[g] -= 1
            results.append(LetterResult.MISPLACED)
        else:
            results.append(LetterResult.ABSENT)
    return results


def is_solved(results: Sequence[LetterResult]) -> bool:
    return bool(results) and all(r is LetterResult.CORRECT for r in results)


def pattern_string(results: Sequence[LetterResult]) -> str:
    """Compact 'G'/'Y'/'-' form, used in CSV output and tests."""
    return "".join(r.value for r in results)


def render_guess(guess: str, results: Sequence[LetterResult]) -> str:
    """One history line: glyphs, the guessed word, trailing newline."""
    return "".join(r.glyph for r in results) + f" {guess}\n"
