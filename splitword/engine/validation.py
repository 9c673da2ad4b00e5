"""
Input validation for the interactive front end.

The engine only ever works on clean words and LetterResult sequences; anything
typed by a person goes through here first so the CLI can re-prompt instead of
pushing bad data into a session.

Feedback is accepted in two spellings:
  - digits  : 2 = green, 1 = yellow, 0 = gray     e.g. "01120"
  - letters : G = green, Y = yellow, - or B = gray e.g. "-YYG-"
"""

from typing import Iterable, List, Optional, Set

from .feedback import LetterResult

_FEEDBACK_CODES = {
    "2": LetterResult.CORRECT,
    "1": LetterResult.MISPLACED,
    "0": LetterResult.ABSENT,
    "g": LetterResult.CORRECT,
    "y": LetterResult.MISPLACED,
    "-": LetterResult.ABSENT,
    "b": LetterResult.ABSENT,
}


def parse_feedback(text: str, N: int = 5) -> List[LetterResult]:
    """
    Parse one board's feedback line into N LetterResults.

    Raises:
      ValueError with a message suitable for showing to the user.
    """
    s = text.strip().lower()
    if len(s) != N:
        raise ValueError(f"feedback must be {N} characters (e.g. 01120 or -YYG-)")
    try:
        return [_FEEDBACK_CODES[ch] for ch in s]
    except KeyError as e:
        raise ValueError("feedback must use only 2/1/0 or G/Y/-") from e


def validate_guess(word: str, N: int = 5, allowed: Optional[Iterable[str]] = None) -> bool:
    """
    Return True if `word` is a usable guess: alphabetic a–z, exact length N,
    and (when `allowed` is given) present in that list.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    if len(w) != N or not w.isalpha() or not w.isascii():
        return False

    if allowed is None:
        return True
    allowed_set: Set[str] = allowed if isinstance(allowed, (set, frozenset)) else set(allowed)
    return w in allowed_set
