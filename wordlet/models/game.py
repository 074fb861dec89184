"""
Game Data Models

Contains all game-related data structures, enums and error types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class GameStatus(Enum):
    """Lifecycle of a single game. WON and LOST are terminal."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


class GameDifficulty(Enum):
    """Difficulty selected when the game is created."""
    EASY = "EASY"
    HARD = "HARD"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "GameDifficulty":
        """Parse a user supplied difficulty name; anything but 'hard' is easy."""
        if name and name.strip().lower() == "hard":
            return cls.HARD
        return cls.EASY


class HitAccuracy(Enum):
    """How a guessed letter relates to the answer."""
    NOT_IN_WORD = "NOT_IN_WORD"
    IN_WORD = "IN_WORD"
    IN_RIGHT_PLACE = "IN_RIGHT_PLACE"

    @property
    def rank(self) -> int:
        return _ACCURACY_RANK[self]

    def is_better_than(self, other: "HitAccuracy") -> bool:
        return self.rank > other.rank


_ACCURACY_RANK: Dict[HitAccuracy, int] = {
    HitAccuracy.NOT_IN_WORD: 0,
    HitAccuracy.IN_WORD: 1,
    HitAccuracy.IN_RIGHT_PLACE: 2,
}


class RowState(Enum):
    """Display state of one of the six board rows."""
    EMPTY = "EMPTY"
    CURRENT = "CURRENT"
    ALREADY_GUESSED = "ALREADY_GUESSED"


class GuessResultKind(Enum):
    """Every outcome of submitting a guess."""
    VALID = "VALID"
    INCORRECT_CHARACTER_COUNT = "INCORRECT_CHARACTER_COUNT"
    DUPLICATE_GUESS = "DUPLICATE_GUESS"
    NOT_IN_DICTIONARY = "NOT_IN_DICTIONARY"
    GAME_IS_ALREADY_OVER = "GAME_IS_ALREADY_OVER"
    LETTER_DOES_NOT_MATCH = "LETTER_DOES_NOT_MATCH"
    DOES_NOT_INCLUDE_REQUIRED_LETTER = "DOES_NOT_INCLUDE_REQUIRED_LETTER"


@dataclass(frozen=True)
class GuessResult:
    """
    Outcome of a guess submission.

    `letter` is set for LETTER_DOES_NOT_MATCH (the expected letter) and
    DOES_NOT_INCLUDE_REQUIRED_LETTER (the missing letter). `position` is the
    1-based column for LETTER_DOES_NOT_MATCH.
    """
    kind: GuessResultKind
    letter: Optional[str] = None
    position: Optional[int] = None

    @property
    def is_valid(self) -> bool:
        return self.kind is GuessResultKind.VALID

    @classmethod
    def letter_does_not_match(cls, expected: str, position: int) -> "GuessResult":
        return cls(GuessResultKind.LETTER_DOES_NOT_MATCH, letter=expected, position=position)

    @classmethod
    def does_not_include_required_letter(cls, letter: str) -> "GuessResult":
        return cls(GuessResultKind.DOES_NOT_INCLUDE_REQUIRED_LETTER, letter=letter)

    def to_dict(self) -> Dict[str, Optional[object]]:
        return {
            "kind": self.kind.value,
            "letter": self.letter,
            "position": self.position,
        }


# Shared instances for the results that carry no payload
VALID = GuessResult(GuessResultKind.VALID)
INCORRECT_CHARACTER_COUNT = GuessResult(GuessResultKind.INCORRECT_CHARACTER_COUNT)
DUPLICATE_GUESS = GuessResult(GuessResultKind.DUPLICATE_GUESS)
NOT_IN_DICTIONARY = GuessResult(GuessResultKind.NOT_IN_DICTIONARY)
GAME_IS_ALREADY_OVER = GuessResult(GuessResultKind.GAME_IS_ALREADY_OVER)


@dataclass(frozen=True)
class GuessLetter:
    """A single scored letter of a guess."""
    letter: str
    accuracy: HitAccuracy


@dataclass(frozen=True)
class WordGuess:
    """An accepted guess: exactly five scored letters."""
    letters: Tuple[GuessLetter, ...]

    @property
    def word(self) -> str:
        return "".join(gl.letter for gl in self.letters)

    def to_pairs(self) -> List[Tuple[str, str]]:
        return [(gl.letter, gl.accuracy.value) for gl in self.letters]


@dataclass
class GameOptions:
    """Construction arguments for a Game."""
    answer: Optional[str] = None
    difficulty: GameDifficulty = GameDifficulty.EASY


@dataclass
class GameState:
    """Serializable snapshot of a game, safe to send to a client."""
    game_id: str
    difficulty: str
    status: str
    current_round: int
    max_rounds: int
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Accuracy as string for JSON serialization
    letter_status: Dict[str, str]
    row_states: List[str] = field(default_factory=list)
    answer: Optional[str] = None  # Only included once the game is lost


class GameError(Exception):
    """Base class for misuse of the game API."""


class GameNotLostError(GameError):
    """Raised when the answer is requested before the game has been lost."""

    def __init__(self, status: GameStatus):
        super().__init__(f"The answer is only revealed once the game is lost (status: {status.value})")
        self.status = status


class InvalidAnswerError(GameError, ValueError):
    """Raised when an explicit answer is not a five letter word."""


class GameNotFoundError(GameError, KeyError):
    """Raised by the game service for unknown game ids."""

    def __init__(self, game_id: str):
        super().__init__(game_id)
        self.game_id = game_id

    def __str__(self) -> str:
        return f"Game not found: {self.game_id}"
