"""
Guess ranking on top of the letter score table.

Idea:
  - Value each word as the sum of table entries for its DISTINCT letters, read
    at the slot matching how many copies of the letter the word holds.
  - Words that could themselves be the solution get value * 1.1 + 1, so an
    answer-capable guess beats a purely informational guess of equal value.
  - With several boards the values add up: each board scores the word against
    its own candidates and table.

Selection is a plain fold over the pool in its given order; a later word
replaces the current best only when it scores strictly higher.
"""

from __future__ import annotations

import logging
from typing import Callable, Collection, List, Optional, Sequence, Tuple

from .letters import LetterScoreTable, count_letters, letter_value, score_letters

log = logging.getLogger(__name__)

CANDIDATE_FACTOR = 1.1
CANDIDATE_BONUS = 1.0

# (candidate set, letter table) for one board
BoardView = Tuple[Collection[str], LetterScoreTable]


def word_value(word: str, table: LetterScoreTable, candidates: Collection[str] = ()) -> float:
    """
    Value of guessing `word` against one board.

    Examples:
      word_value("crane", {"c": [2, 0, 0, 0]}) -> 2
      word_value("crane", {"c": [2, 0, 0, 0]}, {"crane"}) -> 3.2
    """
    base = sum(letter_value(letter, count, table) for letter, count in count_letters(word).items())
    if word in candidates:
        return base * CANDIDATE_FACTOR + CANDIDATE_BONUS
    return base


def _board_views(candidate_lists: Sequence[Sequence[str]]) -> List[BoardView]:
    return [(frozenset(words), score_letters(words)) for words in candidate_lists]


def _aggregate_value(word: str, views: Sequence[BoardView]) -> float:
    return sum(word_value(word, table, cands) for cands, table in views)


def _best(pool: Sequence[str], value: Callable[[str], float]) -> Tuple[str, float]:
    best_word, best_score = pool[0], value(pool[0])
    for w in pool[1:]:
        s = value(w)
        if s > best_score:
            best_word, best_score = w, s
    return best_word, best_score


def choose_shared_word(candidate_lists: Sequence[Sequence[str]], guess_pool: Sequence[str]) -> str:
    """
    Pick the guess with the highest value summed over all boards.

    Args:
      candidate_lists : one candidate list per still-unsolved board
      guess_pool      : words allowed as the guess, in tie-break order

    Raises:
      ValueError if the pool is empty.
    """
    if not guess_pool:
        raise ValueError("guess pool is empty")

    views = _board_views(candidate_lists)
    best_word, best_score = _best(guess_pool, lambda w: _aggregate_value(w, views))
    log.debug("chose %s (value %.2f) from %d words", best_word, best_score, len(guess_pool))
    return best_word


def choose_word(candidates: Sequence[str], guess_pool: Optional[Sequence[str]] = None,
                table: Optional[LetterScoreTable] = None) -> str:
    """
    Single-board form. The pool defaults to the candidates themselves and the
    table to score_letters(candidates).
    """
    pool = candidates if guess_pool is None else guess_pool
    if table is None:
        return choose_shared_word([candidates], pool)
    if not pool:
        raise ValueError("guess pool is empty")

    cands = frozenset(candidates)
    return _best(pool, lambda w: word_value(w, table, cands))[0]


def ranked_words(candidate_lists: Sequence[Sequence[str]], guess_pool: Sequence[str],
                 top: int = 10) -> List[Tuple[str, float]]:
    """Top `top` guesses with their aggregate values (stable on ties)."""
    views = _board_views(candidate_lists)
    scored = [(w, _aggregate_value(w, views)) for w in guess_pool]
    scored.sort(key=lambda ws: -ws[1])
    return scored[:top]
