# apps/cli/batch.py
"""
Simulate a game for every dictionary word and report how many guesses each
took.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Plays each answer (or a seeded --sample of them) as a single-board game,
     with a live progress indicator.
  3) Stops after the current game on Ctrl-C (press again to abort at once),
     then prints the frequency of guess counts and summary statistics.
  4) With --outdir, writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, dictionary report, frequencies, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import signal
import sys
import time
from typing import Dict, List

from tqdm import tqdm

from splitword.datasets import load_words, pretty_summary, validate_dictionary
from splitword.harness import CancelToken, GameConfig, run_batch, score_frequencies, summarize
from splitword.harness.io import write_run
from splitword.harness.summary import pretty_stats

BATCH_ROUNDS = 10


def _install_sigint(token: CancelToken):
    """
    First Ctrl-C finishes the current game and reports; the second exits.

    Returns the previous SIGINT handler.
    """
    def second(signum, frame):
        sys.exit(1)

    def first(signum, frame):
        token.cancel()
        signal.signal(signal.SIGINT, second)

    return signal.signal(signal.SIGINT, first)


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="splitword — simulate every answer")
    ap.add_argument("--file", default="words.json", help="dictionary (JSON array or text)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--hard", action="store_true", help="only guess possible answers")
    ap.add_argument("--rounds", type=int, default=BATCH_ROUNDS, help="round budget per game")
    ap.add_argument("--sample", type=int, help="play only K answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", help="write CSV + manifest here")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="progress display (auto = bar on a terminal, else plain text)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")

    # 1) Validate and load
    rep = validate_dictionary(args.file, args.N)
    print(pretty_summary(rep))
    words = [w for w in load_words(args.file) if len(w) == args.N]
    if not words:
        print(f"No {args.N}-letter words in {args.file}", file=sys.stderr)
        return 1

    try:
        config = GameConfig(hard_mode=args.hard, rounds=args.rounds)
    except ValueError as e:
        ap.error(str(e))

    # 2) Choose cases
    if args.sample and args.sample < len(words):
        pool = list(words)
        random.Random(args.seed).shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(words)

    token = CancelToken()
    previous_handler = _install_sigint(token)

    # 3) Run with progress
    mode = _progress_mode(args.progress)
    total = len(cases)
    start = time.time()
    state = {"last_print": 0.0, "done": 0}
    bar = tqdm(total=total, ncols=80, desc="Playing", unit="game") if mode == "bar" else None

    def on_game(r: Dict) -> None:
        state["done"] += 1
        if bar is not None:
            bar.update(1)
        elif mode == "plain":
            now = time.time()
            idx = state["done"]
            if now - state["last_print"] >= 1.0 or idx == total:
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                state["last_print"] = now

    try:
        results = run_batch(words, config, solutions=cases, cancel=token, on_game=on_game)
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    if bar is not None:
        bar.close()
    elif mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 4) Report
    freqs = score_frequencies(results)
    stats = summarize(results)
    if token.cancelled:
        print(f"Cancelled after {len(results)} of {total} games")
    print(freqs)
    print(pretty_stats(stats))

    if args.outdir:
        csv_path, manifest_path = write_run(
            args.outdir, results, config, dictionary=rep, cancelled=token.cancelled,
            extra={"file": args.file, "N": args.N, "sample": args.sample, "seed": args.seed},
        )
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
