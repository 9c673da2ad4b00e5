# apps/cli/score.py
"""
Show what one guess reveals about an answer.

Usage:
  python -m apps.cli.score answer guess
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from splitword.engine import evaluate, update_known, validate_guess
from splitword.harness.render import format_summary, known_summary


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="splitword — score one guess against an answer")
    ap.add_argument("answer")
    ap.add_argument("guess")
    args = ap.parse_args(argv)

    answer, guess = args.answer.lower(), args.guess.lower()
    if not validate_guess(guess, len(answer)):
        ap.error(f"guess must be {len(answer)} letters a-z")

    known = update_known(guess, evaluate(guess, answer))
    print(format_summary(known_summary(known)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
