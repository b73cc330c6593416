import itertools
from types import SimpleNamespace

import pytest

from textsearch.autocorrect import AutoCorrect, edit_distance

WORDS = ["", "a", "ab", "abc", "kitten", "sitting", "flaw", "lawn", "corporation", "corpration", "bank", "banks"]


def dp_distance(a, b):
    matrix = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        matrix[i][0] = i
    for j in range(len(b) + 1):
        matrix[0][j] = j
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[i][j] = min(matrix[i - 1][j] + 1, matrix[i][j - 1] + 1, matrix[i - 1][j - 1] + cost)
    return matrix[len(a)][len(b)]


@pytest.fixture
def corrector():
    return AutoCorrect(SimpleNamespace(MAX_EDIT_DISTANCE=2))


@pytest.mark.parametrize("a,b,expected", [
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
    ("", "abc", 3),
    ("corpration", "corporation", 1),
    ("same", "same", 0),
])
def test_known_distances(a, b, expected):
    assert edit_distance(a, b) == expected


def test_matches_dynamic_programming_table():
    for a, b in itertools.product(WORDS, repeat=2):
        assert edit_distance(a, b) == dp_distance(a, b)


def test_symmetric_and_zero_iff_equal():
    for a, b in itertools.product(WORDS, repeat=2):
        assert edit_distance(a, b) == edit_distance(b, a)
        assert (edit_distance(a, b) == 0) == (a == b)


def test_triangle_inequality():
    for a, b, c in itertools.product(WORDS, repeat=3):
        assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def test_cutoff_caps_distance():
    assert edit_distance("kitten", "sitting", max_dist=2) == 3
    assert edit_distance("abc", "xyzxyzxyz", max_dist=2) == 3


def test_correct_term_stops_at_first_distance_one(corrector):
    assert corrector.correct_term("hat", ["cat", "bat"]) == "cat"
    assert corrector.correct_term("hat", ["bat", "cat"]) == "bat"


def test_correct_term_prefers_strictly_closer(corrector):
    # Equal distances keep the first candidate seen
    assert corrector.correct_term("ab", ["abcd", "xb", "ax"]) == "xb"
    assert corrector.correct_term("abxy", ["abcd", "xyab"]) == "abcd"


def test_correct_term_keeps_term_beyond_max_distance(corrector):
    assert corrector.correct_term("zzzz", ["bank", "world"]) == "zzzz"
    assert corrector.correct_term("bnk", ["bank"], max_dist=0) == "bnk"
    assert corrector.correct_term("anything", []) == "anything"


def test_autocorrect_query_words(corrector):
    vocab = {"bank": None, "mandiri": None, "world": None}
    corrected, changes, oov = corrector.autocorrect_query_words(["bnak", "world", "qqqqqq"], vocab)
    assert corrected == ["bank", "world", "qqqqqq"]
    assert changes == [("bnak", "bank")]
    assert oov == ["qqqqqq"]


def test_get_similar_words_sorted_by_distance_then_frequency(corrector):
    vocab = ["bank", "banks", "band", "tank", "world"]
    doc_freq = {"bank": 1, "banks": 3, "band": 2, "tank": 5, "world": 9}
    similar = corrector.get_similar_words("bank", vocab, doc_freq, top_k=4)
    assert similar == [("bank", 0, 1), ("tank", 1, 5), ("banks", 1, 3), ("band", 1, 2)]
