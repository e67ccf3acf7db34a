"""
Presentation and replay outputs.

Responsibilities:
- format_history:    the "already guessed" block shown when a log is resumed.
- format_candidates: the "Possible words" block, capped at `limit` entries.
- write_csv:         one row per replayed log with candidate counts per guess.
- write_manifest:    dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:      stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Feedback strings are prefixed with an apostrophe in CSV output so
  spreadsheet apps keep strings like "..y.g" as text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Sequence
import csv
import json
import subprocess
import datetime as dt

from packages.engine import MAX_GUESSES, Guess

DISPLAY_LIMIT = 100


def format_history(history: Sequence[Guess]) -> List[str]:
    out = ["== Already guessed =="]
    out += [f"{g.word} :: {g.feedback}" for g in history]
    return out


def format_candidates(words: Iterable[str], limit: int = DISPLAY_LIMIT) -> List[str]:
    """
    Render surviving words, two-space indented, under a header. Stops after
    `limit` words with a note that more exist.
    """
    out = ["Possible words:"]
    for i, w in enumerate(words):
        if i >= limit:
            out.append(f"... there are more than {limit} words")
            break
        out.append(f"  {w}")
    return out


def _excel_safe_feedback(fb: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "..y.g" -> "'..y.g"
    """
    return "'" + fb if fb else fb


def write_csv(results: List[Dict], path: str, max_guesses: int = MAX_GUESSES) -> str:
    """
    Serialize replay results to CSV.

    Schema (columns):
      log, words, guesses, remaining,
      guess_1, feedback_1, left_1, ..., guess_max, feedback_max, left_max

    Each result dict carries `log`, `words` (starting pool size), `history`
    (list of Guess) and `remaining` (list of candidate counts after each guess).

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["log", "words", "guesses", "remaining"]
    for i in range(1, max_guesses + 1):
        fields += [f"guess_{i}", f"feedback_{i}", f"left_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            hist = r.get("history", [])
            left = r.get("remaining", [])
            row = {
                "log": r["log"],
                "words": r["words"],
                "guesses": len(hist),
                "remaining": left[-1] if left else r["words"],
            }

            # Expand history into fixed columns
            for i in range(1, max_guesses + 1):
                if i <= len(hist):
                    g = hist[i - 1]
                    row[f"guess_{i}"] = g.word
                    row[f"feedback_{i}"] = _excel_safe_feedback(g.feedback)
                    row[f"left_{i}"] = left[i - 1]
                else:
                    row[f"guess_{i}"] = ""
                    row[f"feedback_{i}"] = ""
                    row[f"left_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (logs dir, words path, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_logs: number of logs replayed
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
