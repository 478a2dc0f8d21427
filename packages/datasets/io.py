from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str, N: int | None = None) -> List[str]:
    """
    Dictionary for the solver: stripped, lowercased, no blank lines.

    With N, only words of exactly N characters are kept; anything else
    (a trailing empty line, a stray longer word) is dropped here and counted
    in the log, since the solver indexes whatever it is given.
    """
    words = [ln.strip().lower() for ln in read_lines(p)]
    words = [w for w in words if w]
    if N is None:
        return words

    kept = [w for w in words if len(w) == N]
    if len(kept) != len(words):
        log.warning("%s: skipped %d word(s) not %d characters long", p, len(words) - len(kept), N)
    return kept
