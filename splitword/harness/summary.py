"""
Batch statistics.

score_frequencies: how many games took 1, 2, 3, ... guesses.
summarize:         win rate and guess-count statistics over a batch.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np


def score_frequencies(results: List[Dict]) -> Dict[int, int]:
    """{guess_count: games}, sorted by guess count."""
    if not results:
        return {}
    counts = np.bincount(np.asarray([r["guesses"] for r in results], dtype=int))
    return {int(n): int(c) for n, c in enumerate(counts) if c}


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch into a JSON-friendly dict:
      games, wins, win_rate, mean/median/max guesses (over won games),
      mean_time_ms (over all games).
    """
    games = len(results)
    won = np.asarray([r["guesses"] for r in results if r["success"]], dtype=float)
    times = np.asarray([r["time_ms"] for r in results], dtype=float)

    out = {
        "games": games,
        "wins": int(won.size),
        "win_rate": float(won.size / games) if games else 0.0,
        "mean_guesses": None,
        "median_guesses": None,
        "max_guesses": None,
        "mean_time_ms": round(float(times.mean()), 3) if times.size else None,
    }
    if won.size:
        out["mean_guesses"] = round(float(won.mean()), 4)
        out["median_guesses"] = float(np.median(won))
        out["max_guesses"] = int(won.max())
    return out


def pretty_stats(stats: Dict) -> str:
    """
    One-liner for the console.

    Example:
        games=2315 | wins=2301 (99.4%) | mean=3.71 | median=4.0 | max=6
    """
    mean = "-" if stats["mean_guesses"] is None else f"{stats['mean_guesses']:.2f}"
    return (
        f"games={stats['games']} | wins={stats['wins']} ({100.0 * stats['win_rate']:.1f}%) "
        f"| mean={mean} | median={stats['median_guesses'] or '-'} | max={stats['max_guesses'] or '-'}"
    )
