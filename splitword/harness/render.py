"""
Per-board summaries for a presenter.

board_summary() turns a Board into plain data (JSON-friendly); format_summary()
renders that data as the text block the CLI prints after every round.
"""

from __future__ import annotations

from typing import Dict, List

from splitword.engine import Known
from splitword.engine.letters import unseen_letters

from .core import Board


def known_summary(known: Known) -> Dict:
    return {
        "solved": known.solved,
        "fixed": known.fixed,
        "good": dict(sorted(known.good.items())),
        "bad": dict(sorted(known.bad.items())),
        "bad_positions": {k: sorted(v) for k, v in sorted(known.bad_positions.items())},
        # every guessed letter lands in good or bad
        "unguessed": unseen_letters(set(known.good) | set(known.bad)),
        "history": list(known.history),
    }


def board_summary(board: Board) -> Dict:
    out = known_summary(board.known)
    out.update({
        "board": board.index + 1,
        "status": board.status.value,
        "candidates": len(board.candidates),
    })
    return out


def format_summary(summary: Dict) -> str:
    """
    Example:
        🟩⬜⬜🟩🟩 shine
        Known s.ine
        Good {'e': 1, 'i': 1, 'n': 1, 's': 1}
        ...
    """
    lines: List[str] = []
    if "board" in summary:
        lines.append(f"Board {summary['board']} ({summary['status']})")
    lines.append("".join(summary["history"]).rstrip("\n"))

    if summary["solved"]:
        return "\n".join(lines)

    lines.append(f"Known {summary['fixed']}")
    lines.append(f"Good {summary['good']}")
    lines.append(f"Bad {summary['bad']}")
    lines.append(f"Bad Positions {summary['bad_positions']}")
    lines.append(f"Unguessed {summary['unguessed']}")
    return "\n".join(lines)
