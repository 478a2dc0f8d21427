"""
Two-Phase Probe solver: the engine's Solver behind the harness protocol.

The harness hands over the whole history every turn; the wrapped Solver wants
each round exactly once, in order. We remember how many rounds were already
absorbed and feed only the new ones.

Tie-breaks come from set iteration inside the Solver, so unlike the other
solvers the seed does not make its picks reproducible.
"""

from __future__ import annotations

from typing import List, Optional

from packages.engine import Solver, results_from_pattern
from .base import BaseSolver, register


@register
class TwoPhaseProbeSolver(BaseSolver):
    id = "two_phase_probe"
    name = "Two-Phase Probe"
    version = "1.0.0"

    # None -> Solver default (N // 2 + 1 confirmed letters)
    PHASE_THRESHOLD: Optional[int] = None

    def __init__(self):
        super().__init__()
        self.solver: Optional[Solver] = None
        self._absorbed = 0

    def reset(self, *, words: List[str], N: int, seed: int | None = None) -> None:
        super().reset(words=words, N=N, seed=seed)
        self.solver = Solver(self.words, self.N, phase_threshold=self.PHASE_THRESHOLD)
        self._absorbed = 0

    def next_guess(self, state: dict) -> Optional[str]:
        if self.solver is None:
            raise RuntimeError("reset() must be called before next_guess()")

        history = state["history"]
        for guess, patt in history[self._absorbed:]:
            self.solver.absorb_feedback(guess, results_from_pattern(patt))
        self._absorbed = len(history)

        return self.solver.recommend()
