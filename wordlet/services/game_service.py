"""
Game Service

Manages the single-player game sessions served by the API.
"""

import threading
import uuid
from typing import Dict, Optional, Tuple

from ..models.game import (
    GameDifficulty,
    GameNotFoundError,
    GameOptions,
    GameState,
    GuessResult,
)
from .dictionary_service import Dictionary, get_dictionary
from .game_engine import Game


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Answer selection through the shared dictionary
    - Serializing guesses so each Game only sees one caller at a time
    - Game state snapshots without exposing answers to clients
    """

    def __init__(self, dictionary: Optional[Dictionary] = None):
        self.games: Dict[str, Game] = {}  # Store active games by game_id
        self.dictionary = dictionary or get_dictionary()
        self._lock = threading.Lock()

    def create_new_game(self, difficulty: GameDifficulty = GameDifficulty.EASY,
                        answer: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            difficulty: Difficulty for the new game
            answer: Explicit answer; a random dictionary word when omitted

        Returns:
            str: Unique game ID for this session
        """
        game = Game(GameOptions(answer=answer, difficulty=difficulty), dictionary=self.dictionary)
        game_id = str(uuid.uuid4())

        with self._lock:
            self.games[game_id] = game
        return game_id

    def get_game(self, game_id: str) -> Game:
        """
        Look up a game session.

        Raises:
            GameNotFoundError: If no game has this id
        """
        with self._lock:
            return self._get_game(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        with self._lock:
            game = self.games.get(game_id)
            if game is None:
                return None
            return game.to_state(game_id)

    def make_guess(self, game_id: str, guess: str) -> Tuple[GameState, GuessResult]:
        """
        Submits a guess and returns the resulting state.

        Args:
            game_id: Unique game identifier
            guess: The guessed word, already normalized by the caller

        Returns:
            Tuple of (updated GameState, GuessResult)

        Raises:
            GameNotFoundError: If no game has this id
        """
        with self._lock:
            game = self._get_game(game_id)
            _, result = game.submit_guess(guess)
            return game.to_state(game_id), result

    def get_answer(self, game_id: str) -> str:
        """
        Reveals the answer of a lost game.

        Raises:
            GameNotFoundError: If no game has this id
            GameNotLostError: If the game has not been lost
        """
        with self._lock:
            return self._get_game(game_id).get_answer()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            return self.games.pop(game_id, None) is not None

    @property
    def active_games(self) -> int:
        with self._lock:
            return sum(1 for game in self.games.values() if not game.is_over)

    def _get_game(self, game_id: str) -> Game:
        game = self.games.get(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        return game


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Optional[Dictionary] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary)
    return _game_service
