"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    GameDifficulty,
    GameError,
    GameNotFoundError,
    GameNotLostError,
    GameOptions,
    GameState,
    GameStatus,
    GuessLetter,
    GuessResult,
    GuessResultKind,
    HitAccuracy,
    InvalidAnswerError,
    RowState,
    WordGuess,
)

__all__ = [
    'GameDifficulty', 'GameError', 'GameNotFoundError', 'GameNotLostError',
    'GameOptions', 'GameState', 'GameStatus', 'GuessLetter', 'GuessResult',
    'GuessResultKind', 'HitAccuracy', 'InvalidAnswerError', 'RowState', 'WordGuess'
]
