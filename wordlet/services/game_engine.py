"""
Game Engine

The single-player Wordle state machine: guess validation, scoring,
letter knowledge tracking and board row states.
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH
from ..models.game import (
    DUPLICATE_GUESS,
    GAME_IS_ALREADY_OVER,
    INCORRECT_CHARACTER_COUNT,
    NOT_IN_DICTIONARY,
    VALID,
    GameDifficulty,
    GameNotLostError,
    GameOptions,
    GameState,
    GameStatus,
    GuessResult,
    HitAccuracy,
    InvalidAnswerError,
    RowState,
    WordGuess,
)
from .dictionary_service import Dictionary, get_dictionary
from .scoring import correct_positions, merge_letter_knowledge, score_guess

logger = logging.getLogger(__name__)


class Game:
    """
    One game of Wordle.

    The game owns its answer, guess history and everything derived from
    them. `submit_guess` is the only mutator; it either rejects the guess
    without touching any state or applies it completely. Instances are not
    thread safe, callers must serialize access.
    """

    def __init__(self, options: Optional[GameOptions] = None, dictionary: Optional[Dictionary] = None):
        options = options or GameOptions()
        self._dictionary = dictionary or get_dictionary()

        if options.answer is None:
            answer = self._dictionary.random_word()
        else:
            answer = options.answer
            if len(answer) != WORD_LENGTH:
                raise InvalidAnswerError(f"Answer '{answer}' must be exactly {WORD_LENGTH} characters long")

        self._answer: str = answer
        self._difficulty: GameDifficulty = options.difficulty
        self._status: GameStatus = GameStatus.IN_PROGRESS
        self._guesses: List[WordGuess] = []
        self._correct_positions: Set[int] = set()
        self._played_letters: Dict[str, HitAccuracy] = {}
        self._row_states: List[RowState] = [RowState.CURRENT] + [RowState.EMPTY] * (MAX_ROUNDS - 1)

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def difficulty(self) -> GameDifficulty:
        return self._difficulty

    @property
    def guesses(self) -> Tuple[WordGuess, ...]:
        return tuple(self._guesses)

    @property
    def row_states(self) -> List[RowState]:
        return list(self._row_states)

    @property
    def is_over(self) -> bool:
        return self._status is not GameStatus.IN_PROGRESS

    def get_answer(self) -> str:
        """
        Reveal the answer.

        Raises:
            GameNotLostError: unless the game has been lost
        """
        if self._status is not GameStatus.LOST:
            raise GameNotLostError(self._status)
        return self._answer

    def get_letter_match_state(self, letter: str) -> Optional[HitAccuracy]:
        """Best accuracy seen for a letter, or None if it was never played."""
        return self._played_letters.get(letter)

    def is_letter_uncovered(self, letter: str) -> bool:
        """True once a letter is known to be in the answer."""
        return self.get_letter_match_state(letter) in (HitAccuracy.IN_WORD, HitAccuracy.IN_RIGHT_PLACE)

    def letter_states(self) -> Dict[str, HitAccuracy]:
        return dict(self._played_letters)

    def submit_guess(self, guess: str) -> Tuple[GameStatus, GuessResult]:
        """
        Validate and apply a guess.

        Checks run in a fixed order and the first failure is returned with
        the game left untouched.

        Args:
            guess: The guessed word, compared verbatim against the answer

        Returns:
            Tuple of (status after the call, result of the guess)
        """
        rejection = self._validate(guess)
        if rejection is not None:
            logger.debug("Guess %r rejected: %s", guess, rejection.kind.value)
            return self._status, rejection

        letters = score_guess(guess, self._answer)
        self._guesses.append(WordGuess(tuple(letters)))
        merge_letter_knowledge(self._played_letters, letters)
        self._correct_positions.update(correct_positions(letters))

        if guess == self._answer:
            self._status = GameStatus.WON
        elif len(self._guesses) == MAX_ROUNDS:
            self._status = GameStatus.LOST

        # Rows depend on the status: a won game has no current row
        self._recalculate_row_states()

        logger.debug("Guess %d accepted, status %s", len(self._guesses), self._status.value)
        return self._status, VALID

    def _validate(self, guess: str) -> Optional[GuessResult]:
        if self.is_over:
            return GAME_IS_ALREADY_OVER

        if len(guess) != WORD_LENGTH:
            return INCORRECT_CHARACTER_COUNT

        if self._guess_already_exists(guess):
            return DUPLICATE_GUESS

        if not self._dictionary.contains(guess):
            return NOT_IN_DICTIONARY

        if self._difficulty is GameDifficulty.HARD:
            return self._validate_hard_mode(guess)

        return None

    def _validate_hard_mode(self, guess: str) -> Optional[GuessResult]:
        for index, letter in enumerate(guess):
            if index in self._correct_positions and letter != self._answer[index]:
                # Positions are reported 1-based: "the 1st letter"
                return GuessResult.letter_does_not_match(self._answer[index], index + 1)

        for letter in self._answer:
            if self.is_letter_uncovered(letter) and letter not in guess:
                return GuessResult.does_not_include_required_letter(letter)

        return None

    def _guess_already_exists(self, guess: str) -> bool:
        return any(existing.word == guess for existing in self._guesses)

    def _recalculate_row_states(self) -> None:
        guessed = len(self._guesses)

        if guessed == MAX_ROUNDS:
            self._row_states = [RowState.ALREADY_GUESSED] * MAX_ROUNDS
            return

        row_states = []
        for row in range(1, MAX_ROUNDS + 1):
            if row <= guessed:
                row_states.append(RowState.ALREADY_GUESSED)
            elif row == guessed + 1 and self._status is not GameStatus.WON:
                row_states.append(RowState.CURRENT)
            else:
                row_states.append(RowState.EMPTY)
        self._row_states = row_states

    def to_state(self, game_id: str) -> GameState:
        """
        Snapshot the game for a client.

        The answer is only included once the game is lost.
        """
        return GameState(
            game_id=game_id,
            difficulty=self._difficulty.value,
            status=self._status.value,
            current_round=len(self._guesses),
            max_rounds=MAX_ROUNDS,
            game_over=self.is_over,
            won=self._status is GameStatus.WON,
            guesses=[g.word for g in self._guesses],
            guess_results=[g.to_pairs() for g in self._guesses],
            letter_status={letter: accuracy.value for letter, accuracy in sorted(self._played_letters.items())},
            row_states=[row.value for row in self._row_states],
            answer=self._answer if self._status is GameStatus.LOST else None,
        )
