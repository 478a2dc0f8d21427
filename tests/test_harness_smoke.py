import csv

import pytest
from packages.solvers import create_solver, get_solver_ids
from packages.harness import run_case, run_batch, summarize, pretty_stats, write_csv

TINY = ["apple", "zzzzz", "grape"]


def test_registry_lists_both_solvers():
    assert get_solver_ids() == ["random_consistent", "two_phase_probe"]
    with pytest.raises(ValueError, match="Unknown solver id"):
        create_solver("entropy")


def test_two_phase_probe_solves_tiny_dictionary():
    solver = create_solver("two_phase_probe")
    r = run_case(solver, "apple", words=TINY, N=5, seed=1)
    assert r["success"] is True
    assert r["history"] == [("grape", "--YYG"), ("apple", "GGGGG")]
    assert r["guesses"] == 2 and r["reason"] == "solved"


def test_solver_is_rebuilt_between_games():
    solver = create_solver("two_phase_probe")
    assert run_case(solver, "apple", words=TINY, N=5)["success"] is True
    r = run_case(solver, "grape", words=TINY, N=5)
    assert r["success"] is True and r["guesses"] == 1


def test_answer_outside_dictionary_ends_without_recommendation():
    solver = create_solver("two_phase_probe")
    r = run_case(solver, "lemon", words=TINY, N=5)
    assert r["success"] is False
    assert r["reason"] == "no_recommendation"
    assert r["guesses"] == 1


def test_random_consistent_smoke():
    answers = ["crane", "raise", "stare"]
    solver = create_solver("random_consistent")
    r = run_case(solver, "crane", words=answers + ["trace", "cared"], N=5, seed=42)
    assert r["success"] is True


def test_max_turns_must_be_positive():
    with pytest.raises(ValueError):
        run_case(create_solver("two_phase_probe"), "apple", words=TINY, N=5, max_turns=0)


def test_batch_summary_and_csv(tmp_path):
    solver = create_solver("two_phase_probe")
    results = run_batch(solver, TINY, words=TINY, N=5, seed=3, sample=2)
    assert len(results) == 2
    assert all(r["solver_id"] == "two_phase_probe" for r in results)

    out = write_csv(results, str(tmp_path / "run.csv"), max_turns=6, N=5)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["answer"] == "apple"
    assert rows[0]["patt_1"] == "'--YYG"
    assert rows[0]["guess_6"] == ""


def test_summarize():
    results = [
        {"success": True, "guesses": 2},
        {"success": True, "guesses": 4},
        {"success": False, "guesses": 6, "reason": "out_of_turns"},
    ]
    s = summarize(results)
    assert s["games"] == 3 and s["wins"] == 2
    assert s["success_rate"] == pytest.approx(2 / 3)
    assert s["mean_guesses"] == 3.0 and s["median_guesses"] == 3.0
    assert s["max_guesses"] == 4
    assert s["histogram"] == {2: 1, 4: 1}
    assert s["failures"] == {"out_of_turns": 1}
    assert "wins=2 (66.7%)" in pretty_stats(s)

    empty = summarize([])
    assert empty["games"] == 0 and empty["mean_guesses"] is None


def test_blank_dictionary_entry_is_never_played():
    # a trailing blank line in a word list must not reach the solver
    solver = create_solver("two_phase_probe")
    results = run_batch(solver, ["apple", "zzzzz"], words=["apple", "zzzzz", ""], N=5)
    assert [r["success"] for r in results] == [True, True]
    assert all(g for r in results for g, _ in r["history"])
