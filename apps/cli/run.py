# apps/cli/run.py
"""
CLI entry point for playing a game.

This script:
  1) Loads the dictionary (JSON array or one word per line).
  2) Builds a session over one board per solution (or --boards boards when the
     solutions are unknown and feedback is typed in).
  3) Plays round by round, printing each guess, per-board constraints and the
     remaining candidates, then the guess history and guess count.

Usage:
  python -m apps.cli.run [--verbose|--quiet] [--hard] [--rounds N] answer [answer ...]
  python -m apps.cli.run [--boards K] [--free]          # feedback typed per board
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from splitword.datasets import load_words
from splitword.engine import LetterResult, parse_feedback, validate_guess
from splitword.harness import (
    ContradictionError, GameConfig, Session, SessionStatus, UnknownWordError,
    board_summary, format_summary,
)
from splitword.harness.core import DEFAULT_ROUNDS

DEFAULT_WORDS = "words.json"


def _prompt(text: str) -> str:
    try:
        return input(text)
    except EOFError:
        raise SystemExit(1)


def _request_result(board: int, N: int) -> List[LetterResult]:
    """Ask for one board's feedback until it parses."""
    print(f"Board {board + 1}: enter the result, with 2 for green, 1 for yellow, and 0 for gray. "
          f"For example, enter 01120 for ⬜🟨🟨🟩⬜")
    while True:
        try:
            return parse_feedback(_prompt("? "), N)
        except ValueError as e:
            print(f"Please try again: {e}", file=sys.stderr)


def _request_guess(N: int, allowed: set[str]):
    def guess_source(round_no: int) -> Optional[str]:
        print(f"Round {round_no}: enter the guess (blank for the suggestion)")
        while True:
            w = _prompt("? ").strip().lower()
            if not w or validate_guess(w, N, allowed):
                return w or None
            print(f"Please enter a known {N}-letter word.", file=sys.stderr)
    return guess_source


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="splitword — Wordle/Quordle solver")
    ap.add_argument("solutions", nargs="*",
                    help="known answer(s), one per board; omit to type feedback instead")
    ap.add_argument("--boards", type=int, help="number of boards (default: one per answer, or 1)")
    ap.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS, help="round budget")
    ap.add_argument("--hard", action="store_true",
                    help="only guess words that could still be an answer")
    ap.add_argument("--free", action="store_true", help="type each guess yourself")
    ap.add_argument("--file", default=DEFAULT_WORDS, help="dictionary (JSON array or text)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    noise = ap.add_mutually_exclusive_group()
    noise.add_argument("--quiet", action="store_true", help="only print the final result")
    noise.add_argument("--verbose", action="store_true", help="dump letter scores every round")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    boards = args.boards if args.boards is not None else max(1, len(args.solutions))
    if args.solutions and len(args.solutions) != boards:
        ap.error(f"{len(args.solutions)} answer(s) given for {boards} board(s)")
    try:
        config = GameConfig(hard_mode=args.hard, rounds=args.rounds, boards=boards,
                            verbose=args.verbose)
    except ValueError as e:
        ap.error(str(e))

    try:
        entries = load_words(args.file)
    except (FileNotFoundError, ValueError) as e:
        print(f"Cannot load dictionary: {e}", file=sys.stderr)
        return 1
    N = args.N
    words = [w for w in entries if len(w) == N]
    if len(words) < len(entries):
        print(f"Skipping {len(entries) - len(words)} entries that are not {N} letters",
              file=sys.stderr)
    if not words:
        print(f"No {N}-letter words in {args.file}", file=sys.stderr)
        return 1
    solutions = [s.lower() for s in args.solutions] or None

    feedback = None
    if solutions is None:
        def feedback(index: int, guess: str) -> List[LetterResult]:
            return _request_result(index, N)

    guess_source = _request_guess(N, set(words)) if args.free else None

    try:
        session = Session(words, config, solutions=solutions, feedback=feedback,
                          guess_source=guess_source, length=N)
    except UnknownWordError as e:
        print(e)
        return 1

    chatty = not args.quiet or solutions is None
    while session.status is SessionStatus.PLAYING:
        round_no = session.rounds_played + 1
        hard = " (hard)" if session.uses_hard_mode() else ""
        guess = session.next_guess()
        if chatty:
            print(f"Guessing {guess}{hard} [round {round_no}/{config.rounds}]")
        try:
            record = session.play_round(guess)
        except ContradictionError as e:
            print("Word not known with constraints:", file=sys.stderr)
            print(format_summary(board_summary(e.board)), file=sys.stderr)
            return 1

        if args.quiet:
            continue
        for board in session.boards:
            if board.index not in record.results:
                continue
            print(format_summary(board_summary(board)))
            if board.active:
                print("Possible solutions", board.candidates)

    result = session.result()
    for known in result.knowns:
        print("".join(known.history).strip())
    print(result.rounds)
    if result.status is SessionStatus.LOST:
        if any(result.solutions):
            print("Out of rounds. Solutions:", ", ".join(s for s in result.solutions if s))
        else:
            print("Out of rounds.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
