"""
Candidate filtering given classified feedback.

Given:
  - a pool of words (e.g., the bundled word list)
  - the excluded / greens / yellows constraints from `classify`

Return:
  - words that satisfy all three, in input order, without repeats.

The stages always run in the same order, each consuming the previous stage's
output:
  1) exclusion  : no excluded letter anywhere in the word
  2) greens     : required letter at every constrained slot
  3) yellows    : each yellow letter present, but not at the slot it was seen

Every stage dedupes its output (first occurrence wins) and returns a new list;
inputs are never mutated. An empty result is a valid outcome.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .classify import Excluded, Greens, Yellows, classify
from .sequences import unique_preserve_order

log = logging.getLogger(__name__)


def remove_excluded(words: Iterable[str], excluded: Excluded) -> List[str]:
    """Drop words that contain any excluded letter."""
    out = [w for w in words if not any(c in w for c in excluded)]
    return unique_preserve_order(out)


def keep_green_matches(words: Iterable[str], greens: Greens) -> List[str]:
    """Keep words carrying the required letter at every constrained slot."""
    required = [(i, c) for i, c in enumerate(greens) if c is not None]
    out = [w for w in words if all(w[i] == c for i, c in required)]
    return unique_preserve_order(out)


def _satisfies_yellows(word: str, yellows: Yellows) -> bool:
    for i, letters in enumerate(yellows):
        if not letters:
            continue
        for c in letters:
            # Must be somewhere in the word, just not here.
            if c not in word or word[i] == c:
                return False
    return True


def keep_yellow_matches(words: Iterable[str], yellows: Yellows) -> List[str]:
    """Keep words that contain every yellow letter away from its yellow slot."""
    out = [w for w in words if _satisfies_yellows(w, yellows)]
    return unique_preserve_order(out)


def filter_candidates(words: Iterable[str], excluded: Excluded, greens: Greens,
                      yellows: Yellows) -> List[str]:
    """
    Run the three stages in order.

    Args:
      words    : candidate words (lowercase, WORD_LENGTH letters)
      excluded : letters that must not appear
      greens   : per-slot required letter or None
      yellows  : per-slot set of present-elsewhere letters or None

    Returns:
      List[str] of surviving words (order preserved as in `words`).
    """
    words = list(words)
    stage1 = remove_excluded(words, excluded)
    stage2 = keep_green_matches(stage1, greens)
    stage3 = keep_yellow_matches(stage2, yellows)
    log.debug("filter: %d -> excluded %d -> greens %d -> yellows %d",
              len(words), len(stage1), len(stage2), len(stage3))
    return stage3


def narrow(words: Iterable[str], history: Iterable) -> List[str]:
    """Classify `history` and filter `words` with the result."""
    c = classify(history)
    return filter_candidates(words, c.excluded, c.greens, c.yellows)
