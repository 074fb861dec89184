import pytest

from wordlet.models import GameStatus, GuessResult
from wordlet.models import game as models
from wordlet.utils.helpers import describe_guess_result, describe_outcome, normalize_guess, ordinal


@pytest.mark.parametrize("number,expected", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (5, "5th"),
    (11, "11th"), (12, "12th"), (13, "13th"), (21, "21st"), (22, "22nd"),
])
def test_ordinal(number, expected):
    assert ordinal(number) == expected


@pytest.mark.parametrize("result,expected", [
    (GuessResult.letter_does_not_match("e", 1), "The 1st letter must be 'e'"),
    (GuessResult.letter_does_not_match("e", 4), "The 4th letter must be 'e'"),
    (GuessResult.letter_does_not_match("y", 5), "The 5th letter must be 'y'"),
    (GuessResult.does_not_include_required_letter("b"), "Does not include the required letter 'b'"),
    (models.INCORRECT_CHARACTER_COUNT, "Your guess must be 5 characters long!"),
    (models.NOT_IN_DICTIONARY, "Not a valid word!"),
    (models.DUPLICATE_GUESS, "You already guessed that!"),
    (models.GAME_IS_ALREADY_OVER, "The game is already over!"),
    (models.VALID, ""),
])
def test_describe_guess_result(result, expected):
    assert describe_guess_result(result) == expected


def test_describe_outcome():
    assert describe_outcome(GameStatus.IN_PROGRESS) is None
    assert describe_outcome(GameStatus.WON) == "Game is over! You win!"
    assert describe_outcome(GameStatus.LOST, "slump") == "Game over! The answer was 'slump'."


def test_normalize_guess():
    assert normalize_guess("  SLuMP \n") == "slump"


def test_guess_result_to_dict():
    assert GuessResult.letter_does_not_match("e", 4).to_dict() == {
        "kind": "LETTER_DOES_NOT_MATCH", "letter": "e", "position": 4,
    }
    assert models.VALID.to_dict() == {"kind": "VALID", "letter": None, "position": None}
