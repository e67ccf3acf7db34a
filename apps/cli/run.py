# apps/cli/run.py
"""
Interactive entry point for wordle-re.

This script:
  1) Opens today's guess log (creating ~/.re and the file on first use) and
     shows the guesses already recorded.
  2) Prompts for each new guess and its feedback, appending both to the log.
  3) Narrows the word list with every recorded guess and prints what is left.

Feedback is typed one symbol per letter: g (right spot), y (wrong spot),
. (not in the word), e.g. "gy..g".
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from packages.datasets import DEFAULT_WORDS, load_words, pretty_summary, validate_wordlist
from packages.engine import (MAX_GUESSES, WORD_LENGTH, Guess, WordleReError, narrow,
                             validate_feedback, validate_guess)
from packages.guesslog import (DISPLAY_LIMIT, append_guess, default_log_path, ensure_log,
                               format_candidates, format_history, read_guesses)

log = logging.getLogger(__name__)


def _prompt(label: str, valid: Callable[[str], bool], invalid_msg: str) -> Optional[str]:
    """
    Ask until `valid` accepts the answer. Returns the trimmed, lowercased
    answer, or None when input ends (EOF / Ctrl-C).
    """
    while True:
        try:
            s = input(f"{label} ")
        except (EOFError, KeyboardInterrupt) as e:
            print(f"\nPrompt failed {type(e).__name__}")
            return None
        if valid(s):
            return s.strip().lower()
        print(invalid_msg)


def _confirm(label: str) -> Optional[bool]:
    try:
        s = input(f"{label} [y/N] ")
    except (EOFError, KeyboardInterrupt) as e:
        print(f"\nPrompt failed {type(e).__name__}")
        return None
    return s.strip().lower() in ("y", "yes")


def _collect_guesses(path, history: List[Guess]) -> bool:
    """
    Prompt for guesses until the user stops or MAX_GUESSES is reached,
    appending each to the log. Returns False if input ended mid-prompt.
    """
    for i in range(len(history), MAX_GUESSES):
        word = _prompt("Guess (xxxxx)", validate_guess,
                       f"Invalid string, input length is {WORD_LENGTH}")
        if word is None:
            return False
        feedback = _prompt("Hit letter (format example: gy..g)", validate_feedback,
                           f"Invalid feedback, use {WORD_LENGTH} of g / y / .")
        if feedback is None:
            return False

        g = Guess(word, feedback)
        append_guess(path, g, history)
        history.append(g)

        if i != MAX_GUESSES - 1:
            more = _confirm("Add another guess?")
            if more is None:
                return False
            if not more:
                break
    return True


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, run one interactive session, and print the candidates.
    Returns the process exit code.
    """
    ap = argparse.ArgumentParser(description="wordle-re: narrow the word list from your guesses")
    ap.add_argument("-f", "--file", default=str(default_log_path()),
                    help="guess log to persist your daily guesses (default: today's file in ~/.re)")
    ap.add_argument("--words", default=str(DEFAULT_WORDS),
                    help="word list, one lowercase 5-letter word per line (default: bundled list)")
    ap.add_argument("--limit", type=int, default=DISPLAY_LIMIT,
                    help="maximum number of candidates to print")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        path = ensure_log(args.file)
        history = read_guesses(path)
    except (WordleReError, OSError) as e:
        print(f"err: {e}")
        return 1

    if len(history) >= MAX_GUESSES:
        print("You are out of guesses... Better luck tomorrow!")
        return 0
    if history:
        for line in format_history(history):
            print(line)

    rep = validate_wordlist(WORD_LENGTH, args.words)
    if not rep["passed"]:
        log.warning("word list check: %s (%s)", pretty_summary(rep), "; ".join(rep["issues"]))
    try:
        words = load_words(args.words)
    except OSError as e:
        print(f"err: {e}")
        return 1

    try:
        if not _collect_guesses(path, history):
            return 0
    except (WordleReError, OSError) as e:
        print(f"err: {e}")
        return 1

    candidates = narrow(words, history)
    for line in format_candidates(candidates, limit=args.limit):
        print(line)
    if not candidates:
        print("  (no words match these guesses)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
