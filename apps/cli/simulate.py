# apps/cli/simulate.py
"""
Batch self-play: run a solver against every word of a dictionary.

This script:
  1) Validates the word list (counts, probe words, SHA) and prints a summary.
  2) Loads the N-letter words and instantiates the requested solver.
  3) Plays each answer (or a seeded sample) with a progress indicator,
     prints summary statistics, and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, word-list report, summary, git commit

Usage:
    python -m apps.cli.simulate --solver two_phase_probe --sample 500 --max-turns 12
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.datasets import load_words, validate_dictionary, pretty_summary
from packages.harness import run_case, DEFAULT_MAX_TURNS, summarize, pretty_stats
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.solvers import create_solver, get_solver_ids


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def main(argv=None):
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="Self-play a solver over a word list")
    ap.add_argument("--solver", default="two_phase_probe",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", default="packages/datasets/data/words_5.txt",
                    help="dictionary; every word is also used as a hidden answer")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--sample", type=int, help="play only this many answers (seeded)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed")
    ap.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS,
                    help="guesses allowed per game")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="auto = bar on a terminal, plain text otherwise")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.max_turns < 1:
        raise SystemExit("--max-turns must be at least 1")
    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        raise SystemExit(str(e))

    # 1) Validate and summarize the word list
    rep = validate_dictionary(args.N, args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        raise SystemExit(f"Word list not found: {args.words}")

    # 2) Load
    words = load_words(args.words, args.N)
    if not words:
        raise SystemExit(f"No {args.N}-letter words in {args.words}")

    # 3) Cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    cases = list(dict.fromkeys(words))
    if args.sample and args.sample < len(cases):
        rng.shuffle(cases)
        cases = cases[: args.sample]
    total = len(cases)

    mode = _progress_mode(args.progress)
    iterator = tqdm(cases, ncols=80, desc=solver.id, unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0
    for idx, ans in enumerate(iterator, 1):
        per_seed = args.seed + idx * 1013904223
        r = run_case(solver, ans, words=words, N=args.N, max_turns=args.max_turns, seed=per_seed)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results)
    print(pretty_stats(summary))

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns, N=args.N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
