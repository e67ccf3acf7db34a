"""
Download a word list page and write a clean 5-letter candidate list.

What it does:
- Downloads the page (plain text or HTML).
- Extracts the visible text and pulls out every standalone 5-letter word.
- Lowercases, de-duplicates while preserving page order, and writes to file.

Usage:
    python -m script.fetch_wordlist --url <page> --out packages/datasets/data/words_5.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --url <page> --sort
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from packages.datasets import write_lines
from packages.engine import WORD_LENGTH, unique_preserve_order

WORD_RE = re.compile(rf"\b([A-Za-z]{{{WORD_LENGTH}}})\b")


def extract_words(text: str) -> list[str]:
    """Pull N-letter alphabetic tokens out of visible page text."""
    soup = BeautifulSoup(text, "html.parser")
    visible = soup.get_text("\n", strip=True)
    return unique_preserve_order(m.group(1).lower() for m in WORD_RE.finditer(visible))


def fetch_words(url: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text)


def main():
    ap = argparse.ArgumentParser(description="Fetch a 5-letter word list")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="packages/datasets/data/words_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
