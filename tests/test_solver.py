import logging

import pytest
from packages.engine import (
    Phase, Result, Solver, new_solver, unique_characters,
    filter_candidates, score, score_results,
)

O, X, D = Result.RIGHT_SPOT, Result.WRONG_SPOT, Result.NO_SPOT

WORDS = [
    "crane", "slate", "raise", "stare", "trace", "cared", "adieu", "alone",
    "grape", "apple", "lemon", "level", "belle", "scoop", "cools", "plant",
    "brick", "ghost", "vivid", "zesty", "mound", "plumb", "moist", "tulip",
    "lunar", "ocean", "yacht", "waltz", "ulcer", "frost",
]


@pytest.mark.parametrize("word,expected", [
    ("crane", True),
    ("apple", False),
    ("vivid", False),
    ("a", True),
    ("", True),
    ("ñandú", True),
    ("été", False),
])
def test_unique_characters(word, expected):
    assert unique_characters(word) is expected


def test_construction_seeds_probe_words_and_threshold():
    s = new_solver(["apple", "zzzzz", "grape"], 5)
    assert s.probe_words == {"grape"}
    assert s.candidates() == {"apple", "zzzzz", "grape"}
    assert s.phase_threshold == 3
    assert s.phase is Phase.EXPLORING
    assert s.tried_letters == set() and s.found_letters == set()


def test_worked_example_hits_all_three_rules():
    # answer "apple"; the only probe word is "grape"
    s = Solver(["apple", "zzzzz", "grape"], 5)
    assert s.recommend() == "grape"

    fb = score_results("grape", "apple")
    assert fb == [D, D, X, X, O]
    s.absorb_feedback("grape", fb)
    # g absent      -> grape gone
    # a wrong spot  -> zzzzz gone (no 'a' anywhere)
    # e right spot  -> apple keeps 'e' at 4
    assert s.candidates() == {"apple"}
    assert s.found_letters == {"a", "p", "e"}
    assert s.tried_letters == {"g", "r", "a", "p", "e"}
    assert s.probe_words == set()
    assert s.phase is Phase.EXPLOITING
    assert s.recommend() == "apple"
    assert s.is_solved()


def test_unsatisfiable_feedback_leaves_nothing():
    s = Solver(["apple", "zzzzz", "grape"], 5)
    # 'a' at position 0 but no 'p' anywhere: nothing fits
    s.absorb_feedback("apple", [O, D, D, D, D])
    assert s.is_exhausted()
    assert s.index.any_remaining() is None
    assert s.recommend() is None


def test_no_probe_words_goes_straight_to_candidates():
    s = Solver(["apple", "level", "belle"], 5)
    assert s.probe_words == set()
    assert s.phase is Phase.EXPLOITING
    assert s.recommend() in {"apple", "level", "belle"}


def test_threshold_is_configurable():
    s = Solver(WORDS, 5, phase_threshold=0)
    assert s.phase is Phase.EXPLOITING
    assert s.recommend() in set(WORDS)

    s = Solver(WORDS, 5, phase_threshold=99)
    s.absorb_feedback("crane", score_results("crane", "trace"))
    # plenty of letters found, but the raised bar keeps probing
    assert len(s.found_letters) >= 3
    assert s.probe_words
    assert s.phase is Phase.EXPLORING
    assert s.recommend() in s.probe_words


def test_wrong_length_entries_are_flagged_not_dropped(caplog):
    with caplog.at_level(logging.WARNING, logger="packages.engine.solver"):
        s = Solver(["crane", "", "planets"], 5)
    assert "2 dictionary entries are not 5 characters long" in caplog.text
    assert "planets" in s.index


@pytest.mark.parametrize("answer", ["lemon", "grape", "vivid", "apple", "zesty", "ocean"])
def test_survivors_reproduce_the_absorbed_feedback(answer):
    s = Solver(WORDS, 5)
    history = []
    prev_cands, prev_probes = len(s.candidates()), len(s.probe_words)

    for guess in ["crane", "moist", "plumb"]:
        patt = score(guess, answer)
        history.append((guess, patt))
        s.absorb_feedback(guess, score_results(guess, answer))

        cands = s.candidates()
        # same set the brute-force scorer keeps (distinct-letter guesses)
        assert cands == set(filter_candidates(WORDS, history, 5))
        assert answer in cands
        for w in cands:
            assert score(guess, w) == patt

        # monotonic shrink
        assert len(cands) <= prev_cands
        assert len(s.probe_words) <= prev_probes
        prev_cands, prev_probes = len(cands), len(s.probe_words)


def test_right_spot_and_absent_invariants():
    s = Solver(WORDS, 5)
    fb = score_results("slate", "plant")
    assert fb == [D, O, O, X, D]
    s.absorb_feedback("slate", fb)
    for w in s.candidates():
        assert w[1] == "l" and w[2] == "a"
        assert "s" not in w and "e" not in w
        assert "t" in w and w[3] != "t"
    assert s.candidates() == {"plant"}


def test_tried_letters_never_come_back_in_probes():
    s = Solver(WORDS, 5, phase_threshold=99)
    seen = set()
    for guess in ["crane", "moist"]:
        s.absorb_feedback(guess, [D] * 5)
        seen |= set(guess)
        assert all(not (set(w) & seen) for w in s.probe_words)
        rec = s.recommend()
        if s.phase is Phase.EXPLORING:
            assert not (set(rec) & seen)


def test_phase_switches_at_threshold():
    answer = "crane"
    s = Solver(WORDS, 5)
    for _turn in range(6):
        rec = s.recommend()
        if len(s.found_letters) < s.phase_threshold and s.probe_words:
            assert s.phase is Phase.EXPLORING
            assert unique_characters(rec) and not (set(rec) & s.tried_letters)
        else:
            assert s.phase is Phase.EXPLOITING
            assert rec in s.candidates()
            break
        s.absorb_feedback(rec, score_results(rec, answer))
    else:
        pytest.fail("never left the exploring phase")


def test_single_letter_words_start_exploring():
    s = Solver(["a", "b", "c"], 1)
    assert s.phase_threshold == 1
    assert s.phase is Phase.EXPLORING
    assert s.recommend() in {"a", "b", "c"}

    s.absorb_feedback("b", [O])
    assert s.phase is Phase.EXPLOITING
    assert s.recommend() == "b"


def test_empty_dictionary_has_no_recommendation():
    s = Solver([], 5)
    assert s.phase is Phase.EXPLOITING
    assert s.recommend() is None
    assert s.is_exhausted() and s.remaining == 0
