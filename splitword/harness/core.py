"""
Game coordination.

- Session:   one game over one or more boards sharing every guess (1 board for
             Wordle, 4 for Quordle, ...). Boards advance in lockstep.
- run_batch: simulate many single-board games back to back, checking a
             cancel token between games.

Feedback comes either from known solutions (simulation) or from an external
callable (interactive play); the session does not care which.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from splitword.engine import (
    Known, LetterResult, evaluate, filter_candidates, new_known, pattern_string, update_known,
)
from splitword.engine.letters import score_letters, sorted_table
from splitword.engine.ranking import choose_shared_word, ranked_words

log = logging.getLogger(__name__)

DEFAULT_ROUNDS = 6

# (board index, guess) -> one result per letter
FeedbackSource = Callable[[int, str], Sequence[LetterResult]]
# round number (1-based) -> guess, or None/"" to let the ranker choose
GuessSource = Callable[[int], Optional[str]]


class SplitwordError(Exception):
    pass


class UnknownWordError(SplitwordError, ValueError):
    def __init__(self, word: str):
        super().__init__(f"Unknown word {word}")
        self.word = word


class ContradictionError(SplitwordError):
    """A board ran out of candidates: the feedback it received is inconsistent."""

    def __init__(self, board: "Board"):
        super().__init__(f"board {board.index + 1}: no word fits the constraints")
        self.board = board
        self.known = board.known


@dataclass(frozen=True)
class GameConfig:
    hard_mode: bool = False
    rounds: int = DEFAULT_ROUNDS
    boards: int = 1
    verbose: bool = False

    def __post_init__(self):
        if self.rounds < 1:
            raise ValueError(f"rounds must be >= 1; got {self.rounds}")
        if self.boards < 1:
            raise ValueError(f"boards must be >= 1; got {self.boards}")


class BoardStatus(Enum):
    ACTIVE = "active"
    SOLVED = "solved"
    CONTRADICTION = "contradiction"


class SessionStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass
class Board:
    index: int
    candidates: List[str]
    known: Known
    solution: Optional[str] = None
    status: BoardStatus = BoardStatus.ACTIVE

    @property
    def active(self) -> bool:
        return self.status is BoardStatus.ACTIVE


@dataclass
class RoundRecord:
    number: int
    guess: str
    hard_mode: bool
    results: Dict[int, List[LetterResult]] = field(default_factory=dict)

    def patterns(self) -> Dict[int, str]:
        return {i: pattern_string(r) for i, r in self.results.items()}


@dataclass
class SessionResult:
    status: SessionStatus
    rounds: int
    guesses: List[str]
    knowns: List[Known]
    solutions: List[Optional[str]]

    @property
    def won(self) -> bool:
        return self.status is SessionStatus.WON


def simulated_feedback(solutions: Sequence[str]) -> FeedbackSource:
    """Feedback source that scores every guess against the known solutions."""
    def feedback(index: int, guess: str) -> List[LetterResult]:
        return evaluate(guess, solutions[index])
    return feedback


class Session:
    """
    One game: the dictionary, the boards, the round budget and the round log.

    Args:
      words       : the dictionary, in ranking tie-break order
      config      : GameConfig
      solutions   : one known solution per board (simulation), or None
      feedback    : external feedback source; required when solutions is None
      guess_source: optional override asked for every guess before the ranker
      length      : word length (default: the first solution's, else the first
                    word's); dictionary entries of any other length are dropped
    """

    def __init__(self, words: Sequence[str], config: GameConfig = GameConfig(), *,
                 solutions: Optional[Sequence[str]] = None,
                 feedback: Optional[FeedbackSource] = None,
                 guess_source: Optional[GuessSource] = None,
                 length: Optional[int] = None):
        if not words:
            raise ValueError("dictionary is empty")
        if length is None:
            length = len(solutions[0]) if solutions else len(words[0])
        self.length = length
        self.words: List[str] = [w for w in words if len(w) == length]
        if len(self.words) < len(words):
            log.warning("dropped %d dictionary entries that are not %d letters",
                        len(words) - len(self.words), length)
        if not self.words:
            raise ValueError(f"dictionary has no {length}-letter words")
        self.config = config

        if solutions is not None:
            if len(solutions) != config.boards:
                raise ValueError(
                    f"{len(solutions)} solution(s) given for {config.boards} board(s)")
            known_words = set(self.words)
            for s in solutions:
                if s not in known_words:
                    raise UnknownWordError(s)
            feedback = feedback or simulated_feedback(solutions)
        elif feedback is None:
            raise ValueError("either solutions or a feedback source is required")

        self.feedback = feedback
        self.guess_source = guess_source
        self.boards: List[Board] = [
            Board(index=i, candidates=list(self.words), known=new_known(self.length),
                  solution=None if solutions is None else solutions[i])
            for i in range(config.boards)
        ]
        self.log: List[RoundRecord] = []
        self.status = SessionStatus.PLAYING

    # ---- round bookkeeping ----

    @property
    def rounds_played(self) -> int:
        return len(self.log)

    @property
    def remaining_rounds(self) -> int:
        return self.config.rounds - self.rounds_played

    def active_boards(self) -> List[Board]:
        return [b for b in self.boards if b.active]

    def uses_hard_mode(self) -> bool:
        """Hard mode when configured, or once rounds left <= boards still open."""
        return self.config.hard_mode or self.remaining_rounds <= len(self.active_boards())

    def guess_pool(self) -> List[str]:
        """Full dictionary, or in hard mode the union of open boards' candidates."""
        if not self.uses_hard_mode():
            return self.words
        allowed = set()
        for b in self.active_boards():
            allowed.update(b.candidates)
        return [w for w in self.words if w in allowed]

    def suggest(self) -> str:
        """The ranker's guess for the current round."""
        candidate_lists = [b.candidates for b in self.active_boards()]
        pool = self.guess_pool()
        if self.config.verbose:
            for b in self.active_boards():
                log.info("board %d scored letters %s", b.index + 1,
                         sorted_table(score_letters(b.candidates)))
            log.info("top guesses %s", ranked_words(candidate_lists, pool, top=5))
        return choose_shared_word(candidate_lists, pool)

    # ---- playing ----

    def next_guess(self) -> str:
        """The guess source's word for this round, falling back to the ranker."""
        if self.guess_source is not None:
            guess = self.guess_source(self.rounds_played + 1)
            if guess:
                return guess
        return self.suggest()

    def play_round(self, guess: Optional[str] = None) -> RoundRecord:
        """
        Apply one guess (default: next_guess()) to every open board and advance
        the game.

        Raises:
          ContradictionError if a board is left without candidates.
        """
        if self.status is not SessionStatus.PLAYING:
            raise RuntimeError(f"session already finished ({self.status.value})")

        number = self.rounds_played + 1
        hard = self.uses_hard_mode()
        guess = guess or self.next_guess()
        if len(guess) != self.length:
            raise ValueError(f"guess {guess!r} is not {self.length} letters")

        record = RoundRecord(number=number, guess=guess, hard_mode=hard)
        for board in self.active_boards():
            results = list(self.feedback(board.index, guess))
            record.results[board.index] = results
            board.known = update_known(guess, results, board.known)

            if board.known.solved:
                board.status = BoardStatus.SOLVED
                board.candidates = [guess]
                continue

            board.candidates = filter_candidates(board.candidates, board.known)
            log.debug("round %d board %d: %s -> %d candidates",
                      number, board.index + 1, pattern_string(results), len(board.candidates))
            if not board.candidates:
                board.status = BoardStatus.CONTRADICTION
                self.log.append(record)
                raise ContradictionError(board)

        self.log.append(record)
        if not self.active_boards():
            self.status = SessionStatus.WON
        elif self.remaining_rounds <= 0:
            self.status = SessionStatus.LOST
        return record

    def result(self) -> SessionResult:
        return SessionResult(
            status=self.status,
            rounds=self.rounds_played,
            guesses=[r.guess for r in self.log],
            knowns=[b.known for b in self.boards],
            solutions=[b.solution for b in self.boards],
        )

    def run(self) -> SessionResult:
        """Play rounds until the game is won or lost."""
        while self.status is SessionStatus.PLAYING:
            self.play_round()
        return self.result()


class CancelToken:
    """Set from a signal handler; checked by run_batch between whole games."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


def play_game(words: Sequence[str], solution: str, config: GameConfig) -> Dict:
    """
    Simulate one single-board game to completion.

    Returns:
      dict with keys: answer, success, guesses, time_ms, history (list[(guess, pattern)])
    """
    session = Session(words, replace(config, boards=1), solutions=[solution])
    t0 = time.perf_counter_ns()
    result = session.run()
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    return {
        "answer": solution,
        "success": result.won,
        "guesses": result.rounds,
        "time_ms": dt,
        "history": [(r.guess, r.patterns()[0]) for r in session.log],
    }


def run_batch(
        words: Sequence[str],
        config: GameConfig,
        *,
        solutions: Optional[Sequence[str]] = None,
        cancel: Optional[CancelToken] = None,
        on_game: Optional[Callable[[Dict], None]] = None,
) -> List[Dict]:
    """
    Play every solution (default: the whole dictionary) as its own game.

    The cancel token is only checked between games, so a cancelled batch
    returns the games finished so far and never a half-played one.
    """
    pool = list(words) if solutions is None else list(solutions)

    out: List[Dict] = []
    for answer in pool:
        if cancel is not None and cancel.cancelled:
            log.info("batch cancelled after %d of %d games", len(out), len(pool))
            break
        r = play_game(words, answer, config)
        out.append(r)
        if on_game is not None:
            on_game(r)
    return out
