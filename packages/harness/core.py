"""
Self-play harness.

- run_case:  play one game against a known hidden answer.
- run_batch: play many games in sequence (optionally only the first K).

The reference scorer stands in for the human: it produces the pattern the
player would have typed. A game ends when:
  - the guess is all-green               -> success
  - the solver returns None              -> failure, reason "no_recommendation"
  - max_turns guesses have been made     -> failure, reason "out_of_turns"

Nothing here knows about the console, so the simulate CLI, a notebook or a
test can drive it the same way.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, List, Iterable, Tuple
from packages.engine import score

log = logging.getLogger(__name__)

# The game's own turn budget; self-play may raise it.
DEFAULT_MAX_TURNS = 6


def _check_max_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        words: Iterable[str],
        N: int,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Args:
        solver:    a BaseSolver (reset + next_guess)
        answer:    the hidden word for this case
        words:     dictionary handed to the solver at reset
        N:         word length
        max_turns: guesses allowed before giving up
        seed:      RNG seed for solvers that break ties randomly

    Returns:
        dict with keys: answer, success, guesses, time_ms, history, reason
    """
    _check_max_turns(max_turns)

    # Only N-character words may reach the solver: anything else could be
    # recommended and then fail to score.
    words = list(words)
    pool = [w for w in words if len(w) == N]
    if len(pool) != len(words):
        log.info("skipped %d word(s) not %d characters long", len(words) - len(pool), N)

    # Fresh solver state for this game (index, probe words, RNG)
    solver.reset(words=pool, N=N, seed=seed)

    # (guess, pattern) pairs, handed back to the solver every turn
    history: List[Tuple[str, str]] = []
    reason = "out_of_turns"
    success = False

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        # Solver sees the full history and absorbs what is new to it
        guess = solver.next_guess({"turn": turn, "history": list(history), "N": N})
        if guess is None:
            # Nothing consistent left to suggest: the game is lost here
            reason = "no_recommendation"
            break

        # Stand-in for the human: score against the hidden answer
        patt = score(guess, answer)
        history.append((guess, patt))

        # Win condition: every letter at its right spot
        if patt == "G" * N:
            success = True
            reason = "solved"
            break
    dt = (time.perf_counter() - t0) * 1000.0

    if not success:
        log.info("%s failed on %r after %d guess(es): %s",
                 getattr(solver, "id", "?"), answer, len(history), reason)

    return {
        "answer": answer, "success": success, "guesses": len(history),
        "time_ms": dt, "history": history, "reason": reason,
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        words: List[str],
        N: int,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Play every answer of length N (or the first `sample` of them).

    Per-case seed is seed + index, so reruns repeat but cases differ.
    """
    _check_max_turns(max_turns)

    pool = [w for w in answers if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, ans, words=words, N=N, max_turns=max_turns, seed=case_seed)
        r["solver_id"] = getattr(solver, "id", "?")
        out.append(r)
    return out
