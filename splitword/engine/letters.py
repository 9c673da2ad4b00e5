"""
Letter scoring over the CURRENT candidate set.

For every letter the table keeps TABLE_DEPTH counters; counter i is the number
of candidates holding that letter at least i+1 times. A guess letter is most
useful when it splits the candidates roughly in half, so any counter above
half the candidate count is folded to its complement: letters that almost
every candidate has and letters that almost none has both score low.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Sequence

# Number of occurrence slots per letter. Words with more copies of a letter
# than this are scored at the last slot.
TABLE_DEPTH = 4

LetterScoreTable = Dict[str, List[int]]


def count_letters(word: str) -> Counter[str]:
    return Counter(word)


def score_letters(words: Sequence[str]) -> LetterScoreTable:
    """
    Build the per-letter, per-occurrence table for `words`.

    Returns:
      dict letter -> [n_1, n_2, n_3, n_4], folded around len(words) / 2.
    """
    table: LetterScoreTable = {}

    for w in words:
        for letter, occurrences in count_letters(w).items():
            slots = table.setdefault(letter, [0] * TABLE_DEPTH)
            for i in range(TABLE_DEPTH):
                if i < occurrences:
                    slots[i] += 1

    size = len(words)
    for slots in table.values():
        for i, value in enumerate(slots):
            if value > size / 2:
                slots[i] = size - value
    return table


def letter_value(letter: str, count: int, table: LetterScoreTable) -> int:
    """Table entry for holding `letter` `count` times; 0 for unseen letters."""
    slots = table.get(letter)
    if not slots or count < 1:
        return 0
    return slots[min(count, TABLE_DEPTH) - 1]


def sorted_table(table: LetterScoreTable) -> Dict[str, List[int]]:
    """Table ordered by first-slot value (highest first), for display."""
    return dict(sorted(table.items(), key=lambda kv: (-kv[1][0], kv[0])))


def unseen_letters(seen: Iterable[str], alphabet: str = "abcdefghijklmnopqrstuvwxyz") -> str:
    seen = set(seen)
    return "".join(ch for ch in alphabet if ch not in seen)
