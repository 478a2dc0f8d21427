import io
import logging
from pathlib import Path

import pytest
from apps.cli import solve


@pytest.fixture
def words_file(tmp_path: Path) -> str:
    p = tmp_path / "words_5.txt"
    p.write_text("apple\nzzzzz\ngrape\n\n", encoding="utf-8")
    return str(p)


def _run(monkeypatch, words_file, stdin: str, *extra):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    return solve.main(["--words", words_file, "--N", "5", *extra])


def test_solves_in_two_rounds(monkeypatch, capsys, words_file):
    code = _run(monkeypatch, words_file, "--YYG\nooooo\n")
    out = capsys.readouterr().out
    assert code == 0
    assert "Try: grape" in out and "Try: apple" in out
    assert "Solved in 2 guess(es): apple" in out


def test_bad_feedback_is_reprompted(monkeypatch, capsys, words_file):
    code = _run(monkeypatch, words_file, "oops\no.z..\n")
    out = capsys.readouterr().out
    assert code == 0   # EOF ends the session
    assert "must have 5 symbols" in out
    assert "unknown feedback symbol" in out
    assert out.count("Try: grape") == 1


def test_no_solution_exit_status(monkeypatch, capsys, words_file):
    code = _run(monkeypatch, words_file, "....x\n")
    assert code == 1
    assert "No solution found" in capsys.readouterr().out


def test_player_can_override_the_guess(monkeypatch, capsys, words_file):
    code = _run(monkeypatch, words_file, "apple .....\nq\n")
    out = capsys.readouterr().out
    assert code == 0
    assert "Try: zzzzz" in out


def test_missing_word_list(tmp_path):
    with pytest.raises(SystemExit):
        solve.main(["--words", str(tmp_path / "nope.txt")])


def test_dropped_lines_are_reported_at_default_level(monkeypatch, caplog, tmp_path):
    p = tmp_path / "words_5.txt"
    p.write_text("apple\nplanets\ngrape\n\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        _run(monkeypatch, str(p), "")
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert any("skipped 1 word(s) not 5 characters long" in m for m in warnings)
    assert any("FAIL" in m and "1 blank line(s)" in m for m in warnings)


def test_round_log_shows_pattern(monkeypatch, caplog, words_file):
    with caplog.at_level(logging.INFO, logger="apps.cli.solve"):
        _run(monkeypatch, words_file, "--YYG\n", "--log-level", "INFO")
    assert "round 1: grape -> --YYG, 1 candidate(s) left" in caplog.text
