"""
Per-letter feedback symbols.

Two alphabets are in play:
  - the interactive one typed by the player and consumed by the Solver:
        'o' : right spot   (letter is in the answer at this position)
        'x' : wrong spot   (letter is in the answer, elsewhere)
        '.' : no spot      (letter is not in the answer)
  - the pattern alphabet produced by the reference scorer:
        'G' / 'Y' / '-'

`parse_feedback` is the caller-side gate: the Solver itself never checks
symbols or lengths, so anything typed by a human goes through here first.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List


class Result(str, Enum):
    RIGHT_SPOT = "o"
    WRONG_SPOT = "x"
    NO_SPOT = "."


PATTERN_TO_RESULT: Dict[str, Result] = {
    "G": Result.RIGHT_SPOT,
    "Y": Result.WRONG_SPOT,
    "-": Result.NO_SPOT,
}
RESULT_TO_PATTERN: Dict[Result, str] = {r: p for p, r in PATTERN_TO_RESULT.items()}

# Everything parse_feedback understands, keyed by the upper-cased symbol.
_SYMBOLS: Dict[str, Result] = {
    **PATTERN_TO_RESULT,
    **{r.value.upper(): r for r in Result},
}


def results_from_pattern(pattern: str) -> List[Result]:
    """'G-Y--' -> [RIGHT_SPOT, NO_SPOT, WRONG_SPOT, NO_SPOT, NO_SPOT]"""
    return [PATTERN_TO_RESULT[ch] for ch in pattern]


def pattern_from_results(results: Iterable[Result]) -> str:
    return "".join(RESULT_TO_PATTERN[Result(r)] for r in results)


def parse_feedback(text: str, N: int) -> List[Result]:
    """
    Parse one round of feedback typed by a player.

    Accepts either alphabet ('o x .' or 'G Y -'), case-insensitive, with any
    whitespace ignored, e.g. "o.x..", "G-Y--" or "o . x . .".

    Raises:
      ValueError if the length is not N or a symbol is unknown.
    """
    # Spaces anywhere are ignored; case never matters
    symbols = "".join(text.split()).upper()
    if len(symbols) != N:
        raise ValueError(f"feedback must have {N} symbols; got {len(symbols)} ({text!r})")

    out: List[Result] = []
    for pos, ch in enumerate(symbols, start=1):
        try:
            out.append(_SYMBOLS[ch])
        except KeyError:
            raise ValueError(
                f"unknown feedback symbol {ch!r} at position {pos}; "
                f"use o/x/. or G/Y/-") from None
    return out
