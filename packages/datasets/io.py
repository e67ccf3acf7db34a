from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from packages.engine import WORD_LENGTH, unique_preserve_order

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_WORDS = DATA_DIR / "words_5.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str | None = None, N: int = WORD_LENGTH) -> List[str]:
    """
    Load a candidate word list.

    Tokens are whitespace-separated (one per line in the bundled list),
    lowercased, and kept only if they are N-letter alphabetic words. Repeats
    are dropped, first occurrence wins. With no path, the bundled list is used.
    """
    p = Path(p) if p is not None else DEFAULT_WORDS
    if not p.exists():
        raise FileNotFoundError(p)
    tokens = p.read_text(encoding="utf-8").split()
    words = [t.lower() for t in tokens if len(t) == N and t.isascii() and t.isalpha()]
    out = unique_preserve_order(words)
    skipped = len(tokens) - len(words)
    if skipped:
        log.debug("skipped %d token(s) in %s that are not %d-letter words", skipped, p, N)
    log.info("loaded %d words from %s", len(out), p)
    return out
