"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional

from ..config.game_settings import WORD_LENGTH
from ..models.game import GameStatus, GuessResult, GuessResultKind

WELCOME_MESSAGE = "Welcome to Wordlet. You have six tries to guess the answer. Good luck!"
GAME_WON_MESSAGE = "Game is over! You win!"

_FEEDBACK_MESSAGES = {
    GuessResultKind.VALID: "",
    GuessResultKind.INCORRECT_CHARACTER_COUNT: f"Your guess must be {WORD_LENGTH} characters long!",
    GuessResultKind.NOT_IN_DICTIONARY: "Not a valid word!",
    GuessResultKind.DUPLICATE_GUESS: "You already guessed that!",
    GuessResultKind.GAME_IS_ALREADY_OVER: "The game is already over!",
}


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': None,
        'username': None
    }


def normalize_guess(guess: str) -> str:
    """Guesses are compared in lowercase, like the packaged word list."""
    return guess.strip().lower()


def ordinal(number: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 10 <= number % 100 <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(number % 10, 'th')
    return f"{number}{suffix}"


def describe_guess_result(result: GuessResult) -> str:
    """Player facing feedback for a guess result."""
    if result.kind is GuessResultKind.DOES_NOT_INCLUDE_REQUIRED_LETTER:
        return f"Does not include the required letter '{result.letter}'"

    if result.kind is GuessResultKind.LETTER_DOES_NOT_MATCH:
        return f"The {ordinal(result.position)} letter must be '{result.letter}'"

    return _FEEDBACK_MESSAGES[result.kind]


def describe_outcome(status: GameStatus, answer: Optional[str] = None) -> Optional[str]:
    """Message shown once a game has ended, None while it is still running."""
    if status is GameStatus.WON:
        return GAME_WON_MESSAGE
    if status is GameStatus.LOST:
        return f"Game over! The answer was '{answer}'."
    return None
