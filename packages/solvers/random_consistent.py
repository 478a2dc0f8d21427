"""
Random Consistent baseline.

Keeps its own list of words that agree with every pattern seen so far
(brute-force filter, no index) and picks one uniformly with the seeded RNG.
Useful as a yardstick for the two-phase solver in batch runs.
"""

from __future__ import annotations

from typing import List, Optional

from packages.engine import filter_candidates
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.1.0"

    def __init__(self):
        super().__init__()
        self.candidates: List[str] = []
        self._absorbed = 0

    def reset(self, *, words: List[str], N: int, seed: int | None = None) -> None:
        super().reset(words=words, N=N, seed=seed)
        self.candidates = [w for w in self.words if len(w) == self.N]
        self._absorbed = 0

    def next_guess(self, state: dict) -> Optional[str]:
        history = state["history"]
        fresh = history[self._absorbed:]
        if fresh:
            self.candidates = filter_candidates(self.candidates, fresh, self.N)
            self._absorbed = len(history)

        if not self.candidates:
            return None
        return self.candidates[self.rng.randrange(len(self.candidates))]
