import pytest
from packages.datasets import load_words
from packages.engine import (classify, compute_excluded, compute_greens, compute_yellows,
                             filter_candidates, narrow, remove_excluded, keep_green_matches,
                             keep_yellow_matches, unique_preserve_order)

UNCONSTRAINED = (None, None, None, None, None)


# --- classifier ---

def test_classify_crane_single_yellow():
    c = classify([("crane", "..y..")])
    # every '.' slot is excluded: c, r, n, e
    assert c.excluded == frozenset("crne")
    assert c.greens == UNCONSTRAINED
    assert c.yellows == (None, None, frozenset("a"), None, None)


def test_classify_all_green():
    c = classify([("sound", "ggggg")])
    assert c.greens == ("s", "o", "u", "n", "d")
    assert c.excluded == frozenset()
    assert c.yellows == UNCONSTRAINED


def test_greens_last_writer_wins():
    history = [("crane", "g...."), ("brine", "g....")]
    assert compute_greens(history)[0] == "b"


def test_yellows_accumulate_and_ignore_repeats():
    history = [("crane", "..y.."), ("plaza", "..y.."), ("stain", ".y...")]
    y = compute_yellows(history)
    assert y[1] == frozenset("t")
    assert y[2] == frozenset("a")
    assert y[0] is None and y[3] is None and y[4] is None


def test_excluded_is_union_over_guesses():
    history = [("crane", "....."), ("sloth", "gg...")]
    assert compute_excluded(history) == frozenset("craneoth")


def test_empty_history_is_unconstrained():
    c = classify([])
    assert c.excluded == frozenset()
    assert c.greens == UNCONSTRAINED
    assert c.yellows == UNCONSTRAINED


# --- filter stages ---

def test_crane_scenario_rejects_words_with_excluded_letters():
    history = [("crane", "..y..")]
    # beast/apple carry 'e', roads carries 'r'
    assert narrow(["beast", "apple", "roads"], history) == []
    # salty has 'a' away from slot 2; plaza has it at slot 2
    assert narrow(["beast", "salty", "plaza", "roads"], history) == ["salty"]


def test_sound_scenario_only_exact_match_survives():
    assert narrow(["sound", "round", "found"], [("sound", "ggggg")]) == ["sound"]


def test_five_blank_guesses_exhaust_candidates():
    history = [(w, ".....") for w in ["abcde", "fghij", "klmno", "pqrst", "uvwxy"]]
    assert narrow(["abide", "fight", "lemon"], history) == []


def test_empty_history_returns_words_deduped():
    words = ["crane", "slate", "crane", "adieu"]
    assert narrow(words, []) == ["crane", "slate", "adieu"]
    assert narrow(["crane", "slate"], []) == ["crane", "slate"]


def test_remove_excluded_dedupes():
    assert remove_excluded(["crane", "crane", "slate"], frozenset()) == ["crane", "slate"]
    assert remove_excluded(["crane", "slate", "adieu"], frozenset("c")) == ["slate", "adieu"]


def test_keep_green_matches():
    greens = ("s", None, None, None, "e")
    assert keep_green_matches(["slate", "stare", "crane", "slate"], greens) == ["slate", "stare"]


def test_keep_yellow_matches_requires_presence_and_other_slot():
    yellows = (None, frozenset("a"), None, None, None)
    # crane: 'a' at slot 2 -> ok; maple: 'a' at slot 1 -> rejected; slime: no 'a'
    assert keep_yellow_matches(["crane", "maple", "slime"], yellows) == ["crane"]


def test_yellow_set_with_several_letters():
    yellows = (frozenset("rt"), None, None, None, None)
    assert keep_yellow_matches(["trace", "crate", "tower"], yellows) == ["crate"]


def test_inputs_are_not_mutated():
    words = ["crane", "slate", "crane"]
    snapshot = list(words)
    filter_candidates(words, frozenset("c"), ("s",) + (None,) * 4, (None,) * 5)
    assert words == snapshot


def test_known_issue_duplicate_letter_absent_excludes_globally():
    # "sleep" against the answer "shelf" scores "gyg..": the second 'e' is
    # surplus, but '.' still excludes 'e' everywhere.
    assert "e" in compute_excluded([("sleep", "gyg..")])
    assert narrow(["shelf"], [("sleep", "gyg..")]) == []


def test_unique_preserve_order_with_key():
    assert unique_preserve_order(["Crane", "crane", "slate"], key=str.lower) == ["Crane", "slate"]


# --- properties over the bundled list ---

HISTORIES = [
    [],
    [("crane", "..y..")],
    [("sound", "ggggg")],
    [("slate", ".y..g"), ("lodge", "y...g")],
    [("raise", "y.g.."), ("point", ".ygg.")],
]


@pytest.fixture(scope="module")
def bundled():
    return load_words()


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(x in it for x in sub)


@pytest.mark.parametrize("history", HISTORIES)
def test_stages_narrow_monotonically(bundled, history):
    c = classify(history)
    s1 = remove_excluded(bundled, c.excluded)
    s2 = keep_green_matches(s1, c.greens)
    s3 = keep_yellow_matches(s2, c.yellows)
    assert len(s3) <= len(s2) <= len(s1) <= len(bundled)
    assert _is_subsequence(s1, bundled) and _is_subsequence(s2, s1) and _is_subsequence(s3, s2)
    assert s3 == filter_candidates(bundled, *c)
    assert len(set(s3)) == len(s3)


@pytest.mark.parametrize("history", HISTORIES)
def test_survivors_satisfy_every_constraint(bundled, history):
    c = classify(history)
    for w in filter_candidates(bundled, c.excluded, c.greens, c.yellows):
        assert not any(ch in w for ch in c.excluded)
        for i, r in enumerate(c.greens):
            if r is not None:
                assert w[i] == r
        for i, letters in enumerate(c.yellows):
            for ch in letters or ():
                assert ch in w and w[i] != ch
