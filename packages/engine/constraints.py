"""
Brute-force consistency check against a game history.

A word is consistent with a history of (guess, pattern) pairs if, were it the
answer, scoring each past guess against it reproduces every recorded pattern.

This is the slow, obviously-correct counterpart of the Position Index: the
random baseline solver filters with it, and the tests use it to confirm what
the index keeps.
"""

from typing import Iterable, List, Tuple

from .scoring import score

# (guess, 'G/Y/-' pattern)
History = Iterable[Tuple[str, str]]


def is_consistent(word: str, history: History) -> bool:
    for guess, patt in history:
        # Must reproduce every recorded pattern exactly
        if len(guess) != len(word) or score(guess, word) != patt:
            return False
    return True


def filter_candidates(words: Iterable[str], history: History, N: int) -> List[str]:
    """
    Words of exactly N characters consistent with every entry of `history`,
    in input order.
    """
    # Consumed once per word below
    history = list(history)
    return [w for w in words if len(w) == N and is_consistent(w, history)]
