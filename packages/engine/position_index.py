"""
Position Index: per-position letter buckets over the live candidate words.

Layout:
  slots[i] : dict  char -> set of words having `char` at position i

Invariant:
  a word W sits in slots[i][c]  iff  W is still a candidate and W[i] == c.

Words are removed from every slot inside a single `unregister` call, so no
caller ever observes a half-removed word. Empty buckets are dropped so the
per-slot dicts only hold characters that some live word actually uses.

Enumeration of "all candidates" goes through position 0, which holds every
word with at least one character. Which word `any_remaining` returns when
several are live is unspecified (set iteration order); callers and tests
must not depend on it.

Every elimination rule copies the (char, word) pairs it will visit before
removing anything, because unregistering mutates the very buckets being
walked.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Set, Tuple

log = logging.getLogger(__name__)

Slot = Dict[str, Set[str]]


class PositionIndex:
    def __init__(self, length: int):
        self.length = int(length)
        self.slots: List[Slot] = [{} for _ in range(self.length)]

    # ---- registration ----

    def _positions(self, word: str) -> Iterator[Tuple[Slot, str]]:
        # zip stops at the shorter side: characters past `length` are not indexed
        return zip(self.slots, word)

    def register(self, word: str) -> None:
        for slot, ch in self._positions(word):
            # one bucket per (position, char), created on first use
            slot.setdefault(ch, set()).add(word)

    def unregister(self, word: str) -> None:
        for slot, ch in self._positions(word):
            bucket = slot.get(ch)
            # already gone from this slot (never registered, or removed)
            if bucket is None:
                continue
            bucket.discard(word)
            # drop empty buckets: a live char key always has a word behind it
            if not bucket:
                del slot[ch]

    # ---- elimination rules ----

    def _snapshot(self, index: int) -> List[Tuple[str, str]]:
        """Copy of every (char, word) pair bucketed at `index`."""
        return [(ch, w) for ch, bucket in self.slots[index].items() for w in bucket]

    def eliminate_except_at_position(self, char: str, index: int) -> int:
        """
        Right spot: keep only words with `char` at `index`.

        If `char` has no bucket at `index`, nothing survives; that is a
        legitimate empty state, not an error.
        """
        # every other bucket at this position goes
        doomed = {w for ch, w in self._snapshot(index) if ch != char}
        return self._unregister_all(doomed, "right spot", char, index)

    def eliminate_wrong_spot(self, char: str, index: int) -> int:
        """
        Wrong spot: the answer has `char`, but not at `index`.
          - words with `char` exactly at `index` go
          - words without `char` anywhere go
        """
        # one pass over position `index` sees every live word once
        doomed = {w for ch, w in self._snapshot(index) if ch == char or char not in w}
        return self._unregister_all(doomed, "wrong spot", char, index)

    def eliminate_absent(self, char: str) -> int:
        """No spot: drop every candidate containing `char` anywhere."""
        if not self.slots:
            return 0
        # slot 0 holds every live word exactly once
        doomed = {w for _, w in self._snapshot(0) if char in w}
        return self._unregister_all(doomed, "no spot", char, None)

    def _unregister_all(self, doomed: Set[str], rule: str, char: str,
                        index: Optional[int]) -> int:
        # removal happens only after the doomed set is complete
        for w in doomed:
            self.unregister(w)
        if log.isEnabledFor(logging.DEBUG):
            log.debug("%s %r@%s: eliminated %d, %d left",
                      rule, char, index, len(doomed), len(self))
        return len(doomed)

    # ---- lookup ----

    def any_remaining(self) -> Optional[str]:
        """One arbitrary live candidate, or None when nothing is left."""
        if not self.slots:
            return None
        for bucket in self.slots[0].values():
            for w in bucket:
                return w
        return None

    def candidates(self) -> Set[str]:
        if not self.slots:
            return set()
        out: Set[str] = set()
        for bucket in self.slots[0].values():
            out |= bucket
        return out

    def is_empty(self) -> bool:
        return not self.slots or not self.slots[0]

    def __len__(self) -> int:
        return len(self.candidates())

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word or not self.slots:
            return False
        return word in self.slots[0].get(word[0], ())

    def __repr__(self) -> str:
        return f"PositionIndex(length={self.length}, candidates={len(self)})"
