"""
Services Package

Contains the game engine and all business logic and service classes.
"""

from .dictionary_service import Dictionary, get_dictionary
from .game_engine import Game
from .game_service import GameService, get_game_service, initialize_game_service
from .scoring import score_guess

__all__ = [
    'Dictionary', 'get_dictionary',
    'Game',
    'GameService', 'get_game_service', 'initialize_game_service',
    'score_guess'
]
