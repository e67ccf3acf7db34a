# apps/cli/replay.py
"""
Replay saved guess logs against a word list.

For every *-guesses.txt log in a directory this records how many candidates
remain after each guess, then writes:
   - CSV:  one row per log with guess/feedback/remaining columns
   - JSON: manifest with config, word list hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from tqdm import tqdm

from packages.datasets import DEFAULT_WORDS, load_words, pretty_summary, validate_wordlist
from packages.engine import WORD_LENGTH, WordleReError, narrow
from packages.guesslog import default_log_dir, read_guesses, write_csv, write_manifest
from packages.guesslog.paths import LOG_SUFFIX
from packages.guesslog.report import git_commit_or_unknown, timestamp_id

log = logging.getLogger(__name__)


def replay_log(path: Path, words: List[str]) -> Dict:
    """Narrow `words` guess by guess for the log at `path`."""
    history = read_guesses(path)
    remaining = [len(narrow(words, history[:k])) for k in range(1, len(history) + 1)]
    return {"log": path.name, "words": len(words), "history": history, "remaining": remaining}


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordle-re: replay saved guess logs")
    ap.add_argument("--logs", default=str(default_log_dir()),
                    help="directory holding *-guesses.txt logs (default: ~/.re)")
    ap.add_argument("--words", default=str(DEFAULT_WORDS), help="word list to narrow")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar",
                    help="show a progress bar on stderr")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    rep = validate_wordlist(WORD_LENGTH, args.words)
    print(pretty_summary(rep))
    try:
        words = load_words(args.words)
    except OSError as e:
        print(f"err: {e}")
        return 1

    logs = sorted(Path(args.logs).glob(f"*{LOG_SUFFIX}"))
    if not logs:
        print(f"No guess logs found in {args.logs}")
        return 0

    results = []
    for p in tqdm(logs, ncols=80, desc="Replaying", unit="log", disable=args.progress == "off"):
        try:
            results.append(replay_log(p, words))
        except WordleReError as e:
            log.warning("skipping %s: %s", p, e)

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_logs": len(results),
        "skipped": len(logs) - len(results),
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
