from .core import (
    Board, BoardStatus, CancelToken, ContradictionError, GameConfig, Session, SessionResult,
    SessionStatus, UnknownWordError, play_game, run_batch,
)
from .io import write_csv, write_run
from .render import board_summary, format_summary
from .summary import score_frequencies, summarize

__all__ = [
    "Board", "BoardStatus", "CancelToken", "ContradictionError", "GameConfig", "Session",
    "SessionResult", "SessionStatus", "UnknownWordError", "play_game", "run_batch",
    "write_csv", "write_run", "board_summary", "format_summary",
    "score_frequencies", "summarize",
]
