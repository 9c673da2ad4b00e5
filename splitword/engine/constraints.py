"""
Constraint tracking and candidate filtering.

Feedback from every round is folded into a compact `Known` record:
  - fixed          : pattern of confirmed letters, '.' where unknown
  - good           : letter -> minimum number of copies in the solution
  - bad            : letter -> exclusive upper bound on copies
  - bad_positions  : letter -> positions that cannot hold it (from yellows)

`bad` is written as good + 1 whenever a letter comes back gray, so a guess
with one green and one gray copy of the same letter reads as "exactly one".

Filtering a word list against a `Known` is the step that turns feedback into
a shrinking candidate set.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from .feedback import LetterResult, is_solved, render_guess

WILDCARD = "."


@dataclass(frozen=True)
class Known:
    fixed: str = WILDCARD * 5
    good: Dict[str, int] = field(default_factory=dict)
    bad: Dict[str, int] = field(default_factory=dict)
    bad_positions: Dict[str, FrozenSet[int]] = field(default_factory=dict)
    history: Tuple[str, ...] = ()
    solved: bool = False

    # dict fields: compare with ==, never hash
    __hash__ = None

    @property
    def guess_count(self) -> int:
        return len(self.history)


def new_known(length: int = 5) -> Known:
    """Empty state for a word of `length` letters."""
    return Known(fixed=WILDCARD * length)


def update_known(guess: str, results: Sequence[LetterResult],
                 previous: Optional[Known] = None) -> Known:
    """
    Fold one round of feedback into the previous state.

    Args:
      guess    : the guessed word
      results  : one LetterResult per position of `guess`
      previous : state before this round (empty state if None)

    Returns:
      A new Known; `previous` is left untouched.
    """
    if len(guess) != len(results):
        raise ValueError(f"{len(results)} results for {len(guess)}-letter guess {guess!r}")
    if previous is None:
        previous = new_known(len(guess))
    if len(previous.fixed) != len(guess):
        raise ValueError(f"guess {guess!r} does not fit pattern {previous.fixed!r}")

    fixed: List[str] = []
    round_good: Counter[str] = Counter()
    round_bad: Set[str] = set()
    bad_positions = dict(previous.bad_positions)

    for i, (letter, result) in enumerate(zip(guess, results)):
        if result is LetterResult.CORRECT:
            fixed.append(letter)
            round_good[letter] += 1
        elif result is LetterResult.MISPLACED:
            fixed.append(previous.fixed[i])
            round_good[letter] += 1
            bad_positions[letter] = bad_positions.get(letter, frozenset()) | {i}
        elif result is LetterResult.ABSENT:
            fixed.append(previous.fixed[i])
            round_bad.add(letter)
        else:
            raise ValueError(f"unknown result {result!r} in {list(results)!r}")

    good = {
        letter: max(previous.good.get(letter, 0), round_good.get(letter, 0))
        for letter in set(previous.good) | set(round_good)
    }
    bad = dict(previous.bad)
    for letter in round_bad:
        bad[letter] = good.get(letter, 0) + 1

    return Known(
        fixed="".join(fixed),
        good=good,
        bad=bad,
        bad_positions=bad_positions,
        history=previous.history + (render_guess(guess, results),),
        solved=is_solved(results),
    )


def matches(word: str, known: Known) -> bool:
    """True if `word` is consistent with everything recorded in `known`."""
    if len(word) != len(known.fixed):
        return False
    for ch, f in zip(word, known.fixed):
        if f != WILDCARD and f != ch:
            return False

    counts = Counter(word)
    for letter, minimum in known.good.items():
        if counts[letter] < minimum:
            return False
    for letter, bound in known.bad.items():
        if counts[letter] >= bound:
            return False
    for letter, positions in known.bad_positions.items():
        if any(word[p] == letter for p in positions):
            return False
    return True


def filter_candidates(words: Iterable[str], known: Known) -> List[str]:
    """
    Keep only words consistent with `known` (order preserved as in `words`).
    Pure and idempotent: filtering the result again returns the same list.
    """
    return [w for w in words if matches(w, known)]
