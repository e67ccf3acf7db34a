"""
Error taxonomy for wordle-re.

Everything the project raises on purpose derives from WordleReError so the
CLI can report it in one place. Errors that describe bad input also derive
from ValueError, which keeps `except ValueError` callers working.
"""

from __future__ import annotations


class WordleReError(Exception):
    """Base class for all wordle-re errors."""


class MalformedGuess(WordleReError, ValueError):
    """A guess word or feedback string of the wrong shape."""


class MalformedGuessLog(WordleReError, ValueError):
    """A guess log line pair that does not form a valid Guess."""

    def __init__(self, path, line: int, reason: str):
        self.path = str(path)
        self.line = line
        super().__init__(f"{self.path}:{line}: {reason}")


class GuessLogFull(WordleReError):
    """Raised when appending past MAX_GUESSES."""
