"""
Summary numbers for a batch of self-play results.

Guess statistics are over solved games only; a failed game has no
meaningful guess count.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List

import numpy as np


def summarize(results: List[Dict]) -> Dict:
    games = len(results)
    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=float)
    reasons = Counter(r.get("reason", "") for r in results if not r["success"])

    out: Dict = {
        "games": games,
        "wins": int(solved.size),
        "success_rate": (solved.size / games) if games else 0.0,
        "failures": dict(reasons),
    }
    if solved.size:
        out.update({
            "mean_guesses": float(solved.mean()),
            "median_guesses": float(np.median(solved)),
            "p90_guesses": float(np.percentile(solved, 90)),
            "max_guesses": int(solved.max()),
            "histogram": {int(k): int(v) for k, v in zip(*np.unique(solved, return_counts=True))},
        })
    else:
        out.update({"mean_guesses": None, "median_guesses": None,
                    "p90_guesses": None, "max_guesses": None, "histogram": {}})
    return out


def pretty_stats(summary: Dict) -> str:
    """games=200 | wins=197 (98.5%) | mean=4.31 median=4 p90=6 max=9"""
    head = (f"games={summary['games']} | wins={summary['wins']} "
            f"({100.0 * summary['success_rate']:.1f}%)")
    if summary["mean_guesses"] is None:
        return head
    return (f"{head} | mean={summary['mean_guesses']:.2f} "
            f"median={summary['median_guesses']:g} p90={summary['p90_guesses']:g} "
            f"max={summary['max_guesses']}")
