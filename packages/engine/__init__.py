from .errors import WordleReError, MalformedGuess, MalformedGuessLog, GuessLogFull
from .guess import Guess, GuessHistory, WORD_LENGTH, MAX_GUESSES, GREEN, YELLOW, ABSENT
from .classify import Constraints, classify, compute_excluded, compute_greens, compute_yellows
from .constraints import (filter_candidates, narrow, remove_excluded, keep_green_matches,
                          keep_yellow_matches)
from .sequences import unique_preserve_order
from .validation import validate_guess, validate_feedback

__all__ = [
    "WordleReError", "MalformedGuess", "MalformedGuessLog", "GuessLogFull",
    "Guess", "GuessHistory", "WORD_LENGTH", "MAX_GUESSES", "GREEN", "YELLOW", "ABSENT",
    "Constraints", "classify", "compute_excluded", "compute_greens", "compute_yellows",
    "filter_candidates", "narrow", "remove_excluded", "keep_green_matches",
    "keep_yellow_matches", "unique_preserve_order", "validate_guess", "validate_feedback",
]
