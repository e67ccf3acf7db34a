"""
Reading and appending the guess log.

File layout (UTF-8 text), two lines per guess:

    crane
    ..y..
    sloth
    g..y.

Blank lines are skipped. A trailing word line without its feedback line is
ignored, the same as a guess that was never finished.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from packages.engine import MAX_GUESSES, Guess, GuessLogFull, MalformedGuess, MalformedGuessLog

log = logging.getLogger(__name__)


def ensure_log(p: Path | str) -> Path:
    """Create the log's directory and an empty log file if they are missing."""
    p = Path(p)
    if not p.parent.exists():
        log.info("creating log directory %s", p.parent)
        p.parent.mkdir(parents=True, exist_ok=True)
    if not p.exists():
        log.info("creating guess log %s", p)
        p.touch()
    return p


def read_guesses(p: Path | str) -> List[Guess]:
    """
    Parse the log at `p` into an ordered guess history.
    Raises FileNotFoundError if the path doesn't exist, MalformedGuessLog on a
    bad word/feedback pair or bytes that are not UTF-8.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)

    raw = p.read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedGuessLog(p, raw.count(b"\n", 0, e.start) + 1, "not valid UTF-8") from e

    # (line number, text) of non-blank lines
    lines = [(i, ln.strip()) for i, ln in enumerate(text.splitlines(), 1) if ln.strip()]

    out: List[Guess] = []
    for k in range(0, len(lines) - 1, 2):
        lineno, word = lines[k]
        _, feedback = lines[k + 1]
        try:
            out.append(Guess.parse(word, feedback))
        except MalformedGuess as e:
            raise MalformedGuessLog(p, lineno, str(e)) from e

    if len(lines) % 2:
        log.warning("ignoring unpaired line %d in %s", lines[-1][0], p)
    log.debug("read %d guess(es) from %s", len(out), p)
    return out


def append_guess(p: Path | str, guess: Guess, existing: Sequence[Guess] | None = None) -> None:
    """
    Append one guess (word line, feedback line) to the log.
    `existing` is the history already in the file; it is re-read when omitted.
    """
    p = Path(p)
    if existing is None:
        existing = read_guesses(p) if p.exists() else []
    if len(existing) >= MAX_GUESSES:
        raise GuessLogFull(f"{p} already holds {MAX_GUESSES} guesses")

    with p.open("a", encoding="utf-8") as f:
        f.write(f"{guess.word}\n{guess.feedback}\n")
    log.debug("appended %s :: %s to %s", guess.word, guess.feedback, p)
