"""
Lightweight input checks for the interactive prompts.

These answer "should the prompt accept this text?" and return booleans so the
caller can re-prompt. Building a Guess is still the authoritative check; it
raises MalformedGuess on anything these would reject.

  - a guess word has exactly WORD_LENGTH letters a–z (any case; the prompt
    lowercases it)
  - a feedback string has exactly WORD_LENGTH symbols from g / y / .
"""

from .guess import FEEDBACK_SYMBOLS, WORD_LENGTH


def validate_guess(word: str, N: int = WORD_LENGTH) -> bool:
    """Return True if `word` is an acceptable guess."""
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    return len(w) == N and w.isascii() and w.isalpha()


def validate_feedback(feedback: str, N: int = WORD_LENGTH) -> bool:
    """Return True if `feedback` is N symbols drawn from g / y / '.'."""
    if not isinstance(feedback, str):
        return False
    f = feedback.strip().lower()
    return len(f) == N and set(f) <= FEEDBACK_SYMBOLS
