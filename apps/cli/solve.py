# apps/cli/solve.py
"""
Interactive assistant: suggests a word, you play it, you type the colours.

Each round:
  1) The solver prints a suggestion.
  2) You enter the feedback the game gave you, one symbol per letter:
        o  right spot      (or G)
        x  wrong spot      (or Y)
        .  not in the word (or -)
     e.g. "o.x.." or "G-Y--". Spaces are ignored.
     If you played a different word, type it first: "crane .xo.."
  3) Repeat until the feedback is all right-spot, or type q / Ctrl-D to stop.

Usage:
    python -m apps.cli.solve --words packages/datasets/data/words_5.txt --N 5
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from packages.datasets import load_words, validate_dictionary, pretty_summary
from packages.engine import Result, Solver, parse_feedback, pattern_from_results, validate_guess

log = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}


def _read_round(guess: str, N: int) -> Optional[tuple]:
    """
    Prompt until a usable line arrives.
    Returns (played_word, results), or None to stop.
    """
    while True:
        try:
            line = input("feedback> ").strip()
        except EOFError:
            print()
            return None
        if not line:
            continue
        if line.lower() in QUIT_WORDS:
            return None

        played, text = guess, line
        head, _, rest = line.partition(" ")
        if rest.strip() and validate_guess(head, N):
            played, text = head.lower(), rest

        try:
            return played, parse_feedback(text, N)
        except ValueError as e:
            print(f"  ! {e}")


def interactive_session(solver: Solver, N: int) -> int:
    """
    Drive one game on stdin/stdout. Returns a process exit status:
    0 when solved or stopped by the player, 1 when no word fits the feedback.
    """
    rounds = 0
    while True:
        guess = solver.recommend()
        if guess is None:
            print("No solution found: no word in the list fits all the feedback.")
            return 1

        print(f"Try: {guess}   ({solver.remaining} candidate(s), {solver.phase.value})")
        got = _read_round(guess, N)
        if got is None:
            return 0

        played, results = got
        rounds += 1
        if all(r is Result.RIGHT_SPOT for r in results):
            print(f"Solved in {rounds} guess(es): {played}")
            return 0

        solver.absorb_feedback(played, results)
        log.info("round %d: %s -> %s, %d candidate(s) left",
                 rounds, played, pattern_from_results(results), solver.remaining)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Word-guessing assistant (interactive)")
    ap.add_argument("--words", default="packages/datasets/data/words_5.txt",
                    help="dictionary, one word per line")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--threshold", type=int,
                    help="confirmed letters needed before leaving probe words "
                         "(default: N // 2 + 1)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    rep = validate_dictionary(args.N, args.words)
    if not rep["exists"]:
        raise SystemExit(f"Word list not found: {args.words}")
    if rep["passed"]:
        log.info(pretty_summary(rep))
    else:
        log.warning(pretty_summary(rep))

    words = load_words(args.words, args.N)
    if not words:
        raise SystemExit(f"No {args.N}-letter words in {args.words}")

    solver = Solver(words, args.N, phase_threshold=args.threshold)
    print(f"{len(words)} words loaded. Feedback: o=right spot, x=wrong spot, .=absent; q to quit.")
    return interactive_session(solver, args.N)


if __name__ == "__main__":
    sys.exit(main())
