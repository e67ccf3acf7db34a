"""
Where guess logs live by default.

One log per calendar day, under a dot-directory in the user's home:
    ~/.re/2024-03-01-guesses.txt
"""

from __future__ import annotations

import datetime as dt
from pathlib import Path

LOG_DIR_NAME = ".re"
LOG_SUFFIX = "-guesses.txt"


def default_log_dir(home: Path | str | None = None) -> Path:
    home = Path(home) if home is not None else Path.home()
    return home / LOG_DIR_NAME


def default_log_path(today: dt.date | None = None, home: Path | str | None = None) -> Path:
    """Today's log file, e.g. ~/.re/2024-03-01-guesses.txt."""
    today = today or dt.date.today()
    return default_log_dir(home) / f"{today.isoformat()}{LOG_SUFFIX}"
