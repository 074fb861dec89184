"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game_service
from .helpers import describe_guess_result, describe_outcome, get_user_identity, normalize_guess, ordinal
from .game_logger import game_logger

__all__ = [
    'require_game_service', 'describe_guess_result', 'describe_outcome',
    'get_user_identity', 'normalize_guess', 'ordinal', 'game_logger'
]
