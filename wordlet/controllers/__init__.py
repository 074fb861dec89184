"""
Controllers Package

Contains the Flask blueprints exposing the game over HTTP.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
