from splitword.engine import evaluate, update_known
from splitword.harness import GameConfig, Session, board_summary, format_summary
from splitword.harness.render import known_summary

WORDS = ["crane", "slate", "shine", "spine", "swine"]


def test_board_summary_after_one_round():
    session = Session(WORDS, GameConfig(), solutions=["spine"])
    session.play_round()
    s = board_summary(session.boards[0])

    assert s["board"] == 1
    assert s["status"] == "active"
    assert s["solved"] is False
    assert s["fixed"] == "...ne"
    assert s["good"] == {"e": 1, "n": 1}
    assert s["bad"] == {"a": 1, "c": 1, "r": 1}
    assert s["unguessed"] == "bdfghijklmopqstuvwxyz"
    assert s["candidates"] == 3
    assert s["history"] == ["⬜⬜⬜🟩🟩 crane\n"]


def test_format_summary_open_board():
    known = update_known("slate", evaluate("slate", "least"))
    text = format_summary(known_summary(known))
    lines = text.splitlines()
    assert lines[0] == "🟨🟨🟩🟨🟨 slate"
    assert "Known ..a.." in lines
    assert "Bad Positions {'e': [4], 'l': [1], 's': [0], 't': [3]}" in lines
    assert lines[-1].startswith("Unguessed ")


def test_format_summary_solved_board_only_shows_history():
    known = update_known("crane", evaluate("crane", "crane"))
    assert format_summary(known_summary(known)) == "🟩🟩🟩🟩🟩 crane"
