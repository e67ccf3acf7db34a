"""
The Guess value and the constants that shape it.

A guess is the word that was played plus one feedback symbol per letter:
  - 'g' : correct letter in the correct position
  - 'y' : letter present but in a different position
  - '.' : letter absent

Guesses are validated once, at construction, and are immutable afterwards.
Everything downstream (classifier, filters) relies on that.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .errors import MalformedGuess

WORD_LENGTH = 5
MAX_GUESSES = 5

GREEN = "g"
YELLOW = "y"
ABSENT = "."
FEEDBACK_SYMBOLS = frozenset((GREEN, YELLOW, ABSENT))


@dataclass(frozen=True)
class Guess:
    word: str
    feedback: str

    def __post_init__(self):
        if not isinstance(self.word, str) or not isinstance(self.feedback, str):
            raise MalformedGuess(f"guess word and feedback must be strings: {self.word!r}, {self.feedback!r}")
        if len(self.word) != WORD_LENGTH:
            raise MalformedGuess(f"guess word must have {WORD_LENGTH} letters: {self.word!r}")
        if not (self.word.isascii() and self.word.isalpha() and self.word.islower()):
            raise MalformedGuess(f"guess word must be lowercase a-z letters: {self.word!r}")
        if len(self.feedback) != WORD_LENGTH:
            raise MalformedGuess(f"feedback must have {WORD_LENGTH} symbols: {self.feedback!r}")
        bad = sorted(set(self.feedback) - FEEDBACK_SYMBOLS)
        if bad:
            raise MalformedGuess(f"feedback {self.feedback!r} uses symbols outside g/y/.: {bad}")

    @classmethod
    def parse(cls, word: str, feedback: str) -> "Guess":
        """Build a Guess from user-typed text (trimmed, lowercased)."""
        return cls(word.strip().lower(), feedback.strip().lower())

    def __iter__(self):
        # Lets a Guess unpack like the (word, feedback) pairs callers pass around.
        yield self.word
        yield self.feedback


# Ordered, 0..MAX_GUESSES entries.
GuessHistory = Sequence[Guess]


def as_guess(item) -> Guess:
    """Accept a Guess or a raw (word, feedback) pair."""
    if isinstance(item, Guess):
        return item
    try:
        word, feedback = item
    except (TypeError, ValueError) as e:
        raise MalformedGuess(f"expected a (word, feedback) pair, got {item!r}") from e
    return Guess(word, feedback)
