"""
Dictionary validator.

What this module does:
- Check one word list for a given length N: one word per line, letters only,
  exact length N.
- Count valid, unique, blank, wrong-length and otherwise invalid lines, and
  how many valid words could serve as probe words (no repeated character).
- Hash the raw file (SHA-256) so runs can be tied to the exact list used.
- Return a JSON-serializable dict (for manifests) plus a one-line summary.

Unlike the solver, which indexes whatever it is given, this is strict: a list
with blank or wrong-length lines does not pass, even though the loaders drop
such lines anyway.

Typical use:
    from packages.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary(5, "packages/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from packages.engine import unique_characters


@dataclass
class DictionaryReport:
    N: int
    path: str
    exists: bool
    sha256: str = ""
    count: int = 0              # valid words, duplicates included
    unique_count: int = 0
    probe_count: int = 0        # unique valid words with no repeated character
    blank_lines: int = 0
    wrong_length: int = 0
    invalid_lines: int = 0      # non-blank, right length, but not letters-only
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_dictionary(N: int, path: str) -> Dict:
    """
    Validate the word list at `path` for word length N.

    Returns
    -------
    Dict
        asdict(DictionaryReport); `passed` requires the file to exist, hold at
        least one valid word, and have no blank, wrong-length or invalid
        lines. Duplicates are reported but do not fail the check.
    """
    p = Path(path)
    rep = DictionaryReport(N=N, path=str(p), exists=p.exists())
    if not rep.exists:
        rep.issues.append(f"word list not found: {path}")
        return asdict(rep)

    rep.sha256 = _sha256_file(p)
    valid: List[str] = []
    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip().lower()
            if not w:
                rep.blank_lines += 1
            elif len(w) != N:
                rep.wrong_length += 1
            elif not w.isalpha():
                rep.invalid_lines += 1
            else:
                valid.append(w)

    uniq = set(valid)
    rep.count = len(valid)
    rep.unique_count = len(uniq)
    rep.probe_count = sum(1 for w in uniq if unique_characters(w))

    if rep.count == 0:
        rep.issues.append("word list contains 0 valid words")
    if rep.blank_lines:
        rep.issues.append(f"{rep.blank_lines} blank line(s)")
    if rep.wrong_length:
        rep.issues.append(f"{rep.wrong_length} line(s) not {N} characters long")
    if rep.invalid_lines:
        rep.issues.append(f"{rep.invalid_lines} invalid line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append("word list contains duplicate lines")
    if rep.probe_count == 0 and rep.count:
        rep.issues.append("no probe words (every word repeats a letter)")

    rep.passed = (rep.count > 0 and rep.blank_lines == 0
                  and rep.wrong_length == 0 and rep.invalid_lines == 0)
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Example:
        N=5 | words=2315 (uniq=2315, probes=1567, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    if not report["exists"]:
        return f"N={report['N']} | {report['path']} missing | {status}"
    sha = (report.get("sha256") or "")[:12]
    line = (f"N={report['N']} | words={report['count']} "
            f"(uniq={report['unique_count']}, probes={report['probe_count']}, sha={sha}) "
            f"| {status}")
    if report["issues"]:
        line += " | " + "; ".join(report["issues"])
    return line
