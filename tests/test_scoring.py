import pytest

from wordlet.models import GuessLetter, HitAccuracy
from wordlet.services.scoring import build_letter_counts, merge_letter_knowledge, score_guess

R = HitAccuracy.IN_RIGHT_PLACE
W = HitAccuracy.IN_WORD
N = HitAccuracy.NOT_IN_WORD


@pytest.mark.parametrize("answer,guess,expected", [
    ("haste", "heart", [R, W, W, N, W]),
    ("sleep", "spell", [R, W, R, W, N]),
    ("ahead", "added", [R, N, N, W, R]),
    ("laugh", "larva", [R, R, N, N, N]),
    ("ahead", "lease", [N, W, W, N, N]),
    ("slump", "slept", [R, R, N, W, N]),
    ("level", "sleep", [N, W, W, R, N]),
])
def test_score_guess(answer, guess, expected):
    letters = score_guess(guess, answer)
    assert [gl.letter for gl in letters] == list(guess)
    assert [gl.accuracy for gl in letters] == expected


@pytest.mark.parametrize("answer", ["slump", "abbey", "level", "ahead"])
def test_guessing_the_answer_scores_every_letter_in_right_place(answer):
    assert all(gl.accuracy is R for gl in score_guess(answer, answer))


@pytest.mark.parametrize("answer,guess", [
    ("ahead", "added"),
    ("sleep", "spell"),
    ("abbey", "babel"),
    ("level", "eerie"),
    ("crane", "array"),
    ("slump", "lulls"),
])
def test_repeated_letters_never_marked_more_often_than_they_occur(answer, guess):
    letters = score_guess(guess, answer)
    counts = build_letter_counts(answer)
    for letter in set(guess):
        marked = sum(1 for gl in letters if gl.letter == letter and gl.accuracy is not N)
        assert marked <= counts[letter]


def test_build_letter_counts():
    counts = build_letter_counts("abbey")
    assert counts["b"] == 2
    assert counts["a"] == 1
    assert counts["z"] == 0


def test_accuracy_ranking():
    assert R.is_better_than(W)
    assert W.is_better_than(N)
    assert not N.is_better_than(W)
    assert not R.is_better_than(R)


def test_merge_letter_knowledge_only_upgrades():
    registry = {}
    merge_letter_knowledge(registry, [GuessLetter("e", W), GuessLetter("e", N)])
    assert registry == {"e": W}

    merge_letter_knowledge(registry, [GuessLetter("e", R)])
    assert registry["e"] is R

    merge_letter_knowledge(registry, [GuessLetter("e", N), GuessLetter("e", W)])
    assert registry["e"] is R
