"""
Output files for batch runs.

- write_csv:  one row per simulated game: the game settings, outcome and one
              guess/pattern column pair per round of the budget.
- write_run:  CSV plus a JSON manifest (settings, dictionary report,
              frequencies, stats, cancellation) under one run id.

Patterns are prefixed with an apostrophe so spreadsheet apps keep strings like
"-GYY-" as text instead of reading them as formulas.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .core import GameConfig
from .summary import score_frequencies, summarize

GAME_FIELDS = ["rounds", "hard_mode", "answer", "success", "guesses", "time_ms"]


def write_csv(results: List[Dict], path: str, config: GameConfig) -> str:
    """
    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    history_fields = []
    for i in range(1, config.rounds + 1):
        history_fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=GAME_FIELDS + history_fields)
        w.writeheader()
        for r in results:
            row = {
                "rounds": config.rounds,
                "hard_mode": config.hard_mode,
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            # unplayed rounds stay blank
            row.update(dict.fromkeys(history_fields, ""))
            for i, (guess, patt) in enumerate(r.get("history", []), start=1):
                row[f"guess_{i}"] = guess
                row[f"patt_{i}"] = "'" + patt
            w.writerow(row)
    return str(p)


def run_id(now: Optional[dt.datetime] = None) -> str:
    """UTC stamp used in output file names, e.g. 20250820T024121Z."""
    now = now or dt.datetime.now(dt.timezone.utc)
    return now.strftime("%Y%m%dT%H%M%SZ")


def git_commit() -> str:
    """Short hash of the checked-out commit, or "unknown" outside a git tree."""
    try:
        out = subprocess.run(["git", "rev-parse", "--short", "HEAD"],
                             capture_output=True, check=True, text=True)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip() or "unknown"


def write_run(outdir: str, results: List[Dict], config: GameConfig, *,
              dictionary: Optional[Dict] = None, cancelled: bool = False,
              extra: Optional[Dict] = None) -> Tuple[str, str]:
    """
    Write `batch_<id>.csv` and `batch_<id>_manifest.json` into `outdir`.

    Returns:
      (csv path, manifest path)
    """
    rid = run_id()
    base = Path(outdir)
    csv_path = write_csv(results, str(base / f"batch_{rid}.csv"), config)

    manifest = {
        "run_id": rid,
        "git_commit": git_commit(),
        "config": asdict(config),
        "dictionary": dictionary,
        "games": len(results),
        "cancelled": cancelled,
        "frequencies": {str(k): v for k, v in score_frequencies(results).items()},
        "stats": summarize(results),
    }
    if extra:
        manifest.update(extra)

    manifest_path = base / f"batch_{rid}_manifest.json"
    with manifest_path.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return csv_path, str(manifest_path)
