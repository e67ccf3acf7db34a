"""
Turn a guess history into the three constraint structures used for filtering.

Given a history of guesses (each a word plus per-letter g/y/. feedback):
  - excluded : letters that must not appear anywhere in a candidate
  - greens   : per-slot required letter, or None when unconstrained
  - yellows  : per-slot set of letters known to be present elsewhere,
               or None when unconstrained

Greens and yellows are fixed-size tuples of length WORD_LENGTH; the slot index
is the position in the word.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, NamedTuple, Optional, Set, Tuple

from .guess import ABSENT, GREEN, WORD_LENGTH, YELLOW, Guess, as_guess

log = logging.getLogger(__name__)

Excluded = FrozenSet[str]
Greens = Tuple[Optional[str], ...]
Yellows = Tuple[Optional[FrozenSet[str]], ...]


class Constraints(NamedTuple):
    excluded: Excluded
    greens: Greens
    yellows: Yellows


def _guesses(history: Iterable) -> List[Guess]:
    # Validate everything up front so a bad entry never yields a partial result.
    return [as_guess(g) for g in history]


def compute_excluded(history: Iterable) -> Excluded:
    """
    Union of every letter marked '.' in any guess.

    Known issue: a letter marked '.' is excluded even when the same guess also
    marks it 'g' or 'y' in another slot (e.g. "speed" with ".gy.."). Standard
    scoring would read that '.' as "no further copies", but the letter is
    still dropped globally here, so words that legitimately contain it once
    are rejected too. Kept as-is for compatibility with existing logs.
    """
    out: Set[str] = set()
    for g in _guesses(history):
        for ch, fb in zip(g.word, g.feedback):
            if fb == ABSENT:
                out.add(ch)
    return frozenset(out)


def compute_greens(history: Iterable) -> Greens:
    """
    Required letter per slot. Later guesses overwrite earlier ones for the
    same slot (last writer wins).
    """
    green: List[Optional[str]] = [None] * WORD_LENGTH
    for g in _guesses(history):
        for i, (ch, fb) in enumerate(zip(g.word, g.feedback)):
            if fb == GREEN:
                green[i] = ch
    return tuple(green)


def compute_yellows(history: Iterable) -> Yellows:
    """Letters present in the answer but not at the slot they were guessed in."""
    yellow: List[Set[str]] = [set() for _ in range(WORD_LENGTH)]
    for g in _guesses(history):
        for i, (ch, fb) in enumerate(zip(g.word, g.feedback)):
            if fb == YELLOW:
                yellow[i].add(ch)
    return tuple(frozenset(s) if s else None for s in yellow)


def classify(history: Iterable) -> Constraints:
    guesses = _guesses(history)
    c = Constraints(
        excluded=compute_excluded(guesses),
        greens=compute_greens(guesses),
        yellows=compute_yellows(guesses),
    )
    log.debug("classified %d guess(es): excluded=%s greens=%s yellows=%s",
              len(guesses), "".join(sorted(c.excluded)), c.greens, c.yellows)
    return c
