from .feedback import LetterResult, evaluate, is_solved, pattern_string, render_guess
from .letters import score_letters
from .ranking import choose_word, choose_shared_word, word_value
from .constraints import Known, new_known, update_known, filter_candidates
from .validation import parse_feedback, validate_guess

__all__ = [
    "LetterResult", "evaluate", "is_solved", "pattern_string", "render_guess",
    "score_letters", "choose_word", "choose_shared_word", "word_value",
    "Known", "new_known", "update_known", "filter_candidates",
    "parse_feedback", "validate_guess",
]
