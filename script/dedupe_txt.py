"""
Remove duplicate lines from a text file (e.g. a word list).

Features:
- Preserves original order by default (stable dedupe).
- Optional case-insensitive mode (treat 'CRANE' == 'crane').
- Optional stripping of blank/whitespace-only lines.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in packages/datasets/data/words_5.txt \
        --case-insensitive --strip-blanks
"""

import argparse
from pathlib import Path

from packages.datasets import read_lines, write_lines
from packages.engine import unique_preserve_order


def main():
    ap = argparse.ArgumentParser(description="Remove duplicate lines from a text file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--case-insensitive", action="store_true", help="treat 'CRANE' and 'crane' as the same")
    ap.add_argument("--strip-blanks", action="store_true", help="drop empty/whitespace-only lines")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    if args.strip_blanks:
        lines = [s.strip() for s in lines if s.strip()]

    key = str.lower if args.case_insensitive else None
    out = unique_preserve_order(lines, key=key)
    if args.sort:
        out = sorted(out, key=key)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} unique)")


if __name__ == "__main__":
    main()
