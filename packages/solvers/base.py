from __future__ import annotations
import random
from typing import Dict, List, Optional, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Harness protocol ----
class BaseSolver:
    """
    What the self-play harness talks to.

    reset() starts a new game over `words`; next_guess(state) is called once
    per turn with:
        "turn"    : 1-based turn number
        "history" : list of (guess, 'G/Y/-' pattern) so far
        "N"       : word length
    and returns a word, or None when it has nothing left to suggest.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.words: List[str] = []
        self.rng = random.Random()

    def reset(self, *, words: List[str], N: int, seed: int | None = None) -> None:
        self.words = list(words)
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> Optional[str]:
        raise NotImplementedError("Override in subclass")
