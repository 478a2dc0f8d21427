"""
Two-phase guess recommender built on the Position Index.

Flow:
  solver = new_solver(words, 5)
  loop:
      guess = solver.recommend()          # None -> nothing left to suggest
      ... player enters the guess, reads the feedback ...
      solver.absorb_feedback(guess, feedback)

Strategy:
  Phase 1 (EXPLORING): while fewer than `phase_threshold` letters are known
    to be in the answer, suggest a "probe word": a word whose characters are
    all distinct and none of which has been tried yet. Each probe tests as
    many fresh letters as the word length allows.
  Phase 2 (EXPLOITING): once enough letters are confirmed, or no probe word
    is left, suggest any word still consistent with the feedback.

The default threshold is length // 2 + 1 confirmed letters. It is a heuristic
and can be overridden per solver.

Everything here only ever shrinks (candidates, probe words) or grows (tried
and found letters). The object is plain mutable state for a single caller;
it is not thread-safe.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Optional, Sequence, Set

from .feedback import Result
from .position_index import PositionIndex

log = logging.getLogger(__name__)


class Phase(str, Enum):
    EXPLORING = "exploring"
    EXPLOITING = "exploiting"


def unique_characters(word: str) -> bool:
    """True iff no character occurs twice in `word`."""
    # pairwise compare; words are short
    for i in range(len(word) - 1):
        for j in range(i + 1, len(word)):
            if word[i] == word[j]:
                return False
    return True


def default_phase_threshold(length: int) -> int:
    return length // 2 + 1


class Solver:
    def __init__(self, words: Iterable[str], length: int, *,
                 phase_threshold: Optional[int] = None):
        self.length = int(length)
        self.phase_threshold = (default_phase_threshold(self.length)
                                if phase_threshold is None else int(phase_threshold))
        self.index = PositionIndex(self.length)
        self.tried_letters: Set[str] = set()
        self.found_letters: Set[str] = set()
        self.probe_words: Set[str] = set()

        off_length = 0
        for word in words:
            if len(word) != self.length:
                off_length += 1
            # every entry is a candidate; only distinct-letter ones can probe
            self.index.register(word)
            if unique_characters(word):
                self.probe_words.add(word)

        # Indexed anyway; filtering belongs to whoever loaded the list.
        if off_length:
            log.warning("%d dictionary entr%s not %d characters long",
                        off_length, "y is" if off_length == 1 else "ies are", self.length)
        log.debug("solver ready: %d candidates, %d probe words, threshold %d",
                  len(self.index), len(self.probe_words), self.phase_threshold)

    # ---- feedback ----

    def absorb_feedback(self, word: str, feedback: Sequence[Result]) -> None:
        """
        Apply one round of feedback for `word`.

        `feedback` is aligned with the characters of `word`. Symbols are not
        validated here; pass only RIGHT_SPOT / WRONG_SPOT / NO_SPOT.
        """
        for i, ch in enumerate(word):
            self.tried_letters.add(ch)
            # a probe must test only untried letters
            self.probe_words = {w for w in self.probe_words if ch not in w}

            result = feedback[i]
            # found letters feed the phase switch; tried letters do not
            if result == Result.RIGHT_SPOT:
                self.found_letters.add(ch)
                self.index.eliminate_except_at_position(ch, i)
            elif result == Result.WRONG_SPOT:
                self.found_letters.add(ch)
                self.index.eliminate_wrong_spot(ch, i)
            elif result == Result.NO_SPOT:
                self.index.eliminate_absent(ch)

    # ---- recommendation ----

    @property
    def phase(self) -> Phase:
        # keep probing until enough letters are confirmed or probes run out
        if len(self.found_letters) < self.phase_threshold and self.probe_words:
            return Phase.EXPLORING
        return Phase.EXPLOITING

    def recommend(self) -> Optional[str]:
        """
        Next guess, or None if the active phase has nothing to offer.

        Which word comes back among equally good ones is unspecified.
        """
        phase = self.phase
        log.debug("recommend: %s (%d found / %d needed)",
                  phase.value, len(self.found_letters), self.phase_threshold)
        if phase is Phase.EXPLORING:
            # any probe word will do
            for w in self.probe_words:
                return w
        return self.index.any_remaining()

    # ---- read-only views ----

    def candidates(self) -> Set[str]:
        return self.index.candidates()

    @property
    def remaining(self) -> int:
        return len(self.index)

    def is_solved(self) -> bool:
        return self.remaining == 1

    def is_exhausted(self) -> bool:
        return self.index.is_empty()

    def __repr__(self) -> str:
        return (f"Solver(length={self.length}, phase={self.phase.value}, "
                f"candidates={self.remaining}, probes={len(self.probe_words)})")


def new_solver(words: Iterable[str], length: int, *,
               phase_threshold: Optional[int] = None) -> Solver:
    return Solver(words, length, phase_threshold=phase_threshold)
