"""
Reference feedback for a (guess, answer) pair.

Pattern alphabet:
  'G' : letter at the right spot
  'Y' : letter in the answer, other spot
  '-' : letter absent (or already used up by other G/Y marks)

Two passes, the usual way: greens first while counting the answer's
unmatched letters, then yellows only while a matching letter is left over.
Length is measured in code points, so any alphabet works.

The Solver does not use this; it is the oracle for self-play and for checking
that surviving candidates agree with the feedback they were filtered by.
"""

from collections import Counter
from typing import List

from .feedback import Result, results_from_pattern


def score(guess: str, answer: str) -> str:
    """
    Examples:
      score("belle", "level") -> "-GYYY"
      score("crane", "crane") -> "GGGGG"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"cannot score {guess!r} against {answer!r}: lengths differ")

    # Default: absent
    pattern = ["-"] * len(guess)
    leftover: Counter = Counter()

    # Pass 1: exact matches; count answer letters left unmatched
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            leftover[a] += 1

    # Pass 2: each leftover letter can back at most one Y
    for i, g in enumerate(guess):
        if pattern[i] != "G" and leftover[g] > 0:
            pattern[i] = "Y"
            leftover[g] -= 1

    return "".join(pattern)


def score_results(guess: str, answer: str) -> List[Result]:
    return results_from_pattern(score(guess, answer))
