"""
Turn a raw dictionary into a solver word list.

Features:
- Keeps only letters-only words of exactly N characters (any alphabet).
- Lowercases, and skips capitalised entries (proper nouns) unless asked not to.
- Removes duplicates, preserving first-seen order.
- Optional alphabetical sort.

Usage:
    python -m script.filter_wordlist --in /usr/share/dict/words \
        --out packages/datasets/data/words_5.txt --N 5
"""

import argparse
from pathlib import Path
from typing import Iterable, List

from packages.datasets import write_lines


def clean_words(lines: Iterable[str], N: int, keep_proper: bool = False) -> List[str]:
    seen, out = set(), []
    for raw in lines:
        w = raw.strip()
        if len(w) != N or not w.isalpha():
            continue
        if not keep_proper and w != w.lower():
            continue
        w = w.lower()
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def main(argv=None):
    ap = argparse.ArgumentParser(description="Filter a dictionary down to N-letter words.")
    ap.add_argument("--in", dest="inp", required=True, help="raw dictionary, one word per line")
    ap.add_argument("--out", required=True, help="output .txt file")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--keep-proper", action="store_true",
                    help="keep capitalised entries (lowercased)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically")
    args = ap.parse_args(argv)

    inp = Path(args.inp)
    if not inp.exists():
        raise FileNotFoundError(inp)

    lines = inp.read_text(encoding="utf-8", errors="replace").splitlines()
    words = clean_words(lines, args.N, keep_proper=args.keep_proper)
    if args.sort:
        words.sort()

    outp = write_lines(words, args.out)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(words)} words)")


if __name__ == "__main__":
    main()
