"""
Download a word list and write the N-letter words from it.

What it does:
- GETs the URL (plain-text lists and HTML pages both work).
- For HTML, takes the visible text of the page and pulls out word tokens.
- Filters to letters-only, lowercase, N characters, de-duplicated.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt \
        --out packages/datasets/data/words_5.txt --N 5
"""

import argparse
import re
from typing import List

import requests
from bs4 import BeautifulSoup

from packages.datasets import write_lines
from script.filter_wordlist import clean_words

TOKEN_RE = re.compile(r"[^\W\d_]+")


def fetch_words(url: str, N: int, timeout: float = 30) -> List[str]:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()

    if "html" in r.headers.get("Content-Type", ""):
        text = BeautifulSoup(r.text, "html.parser").get_text("\n", strip=True)
        lines = TOKEN_RE.findall(text)
    else:
        lines = r.text.splitlines()
    return clean_words(lines, N)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Fetch a word list over HTTP")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", required=True)
    ap.add_argument("--N", type=int, default=5)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically")
    args = ap.parse_args(argv)

    words = fetch_words(args.url, args.N)
    if args.sort:
        words.sort()

    outp = write_lines(words, args.out)
    print(f"Wrote {len(words)} {args.N}-letter words -> {outp}")


if __name__ == "__main__":
    main()
