from .validator import validate_dictionary, pretty_summary
from .io import load_words, read_lines, write_words

__all__ = ["validate_dictionary", "pretty_summary", "load_words", "read_lines", "write_words"]
