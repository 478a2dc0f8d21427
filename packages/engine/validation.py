"""
Input checks for the layer that talks to a human.

The Solver trusts its inputs completely, so the interactive loop asks these
first:
  - is this a plausible guess? (string, N letters, optionally in the word list)
  - is this a well-formed feedback line? (N symbols from a known alphabet)
"""

from typing import Container, Optional

from .feedback import parse_feedback


def validate_guess(word: str, N: int, allowed: Optional[Container[str]] = None) -> bool:
    """
    Args:
      word    : proposed guess (case-insensitive)
      N       : required length, in characters
      allowed : optional word list/set; pass a set when calling in a loop
    """
    if not isinstance(word, str):
        return False

    # Normalize like the loaders do before comparing
    w = word.strip().lower()
    if len(w) != N or not w.isalpha():
        return False

    return allowed is None or w in allowed


def validate_feedback(text: str, N: int) -> bool:
    try:
        parse_feedback(text, N)
    except ValueError:
        return False
    return True
