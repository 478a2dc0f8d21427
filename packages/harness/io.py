"""
Writing self-play results to disk.

- write_csv:      one row per game, guesses/patterns spread over fixed columns
- write_manifest: JSON with the run configuration, dictionary report, summary
- timestamp_id:   UTC run id for file names
- git_commit_or_unknown: short hash of the checkout, if there is one

Patterns get a leading apostrophe in the CSV so spreadsheets keep "-GY--"
as text instead of reading it as a formula.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

BASE_FIELDS = ["solver", "N", "answer", "success", "reason", "guesses", "time_ms"]


def _excel_safe(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    Columns: solver, N, answer, success, reason, guesses, time_ms,
             guess_1, patt_1, ..., guess_<max_turns>, patt_<max_turns>

    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turn_fields = []
    for i in range(1, max_turns + 1):
        turn_fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=BASE_FIELDS + turn_fields)
        w.writeheader()

        for r in results:
            row = dict.fromkeys(turn_fields, "")
            row.update({
                "solver": r.get("solver_id", "?"),
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "reason": r.get("reason", ""),
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            })
            for i, (g, patt) in enumerate(r.get("history", [])[:max_turns], start=1):
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = _excel_safe(patt)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)
    return str(p)


def timestamp_id() -> str:
    """e.g. 20261019T024121Z"""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip() or "unknown"
