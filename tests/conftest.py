import os
import random
import tempfile

# Keep server logs out of the working tree; must happen before wordlet is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordlet-logs-'))

import pytest

from wordlet import create_app
from wordlet.config import TestingConfig
from wordlet.models import GameDifficulty, GameOptions
from wordlet.services import Dictionary, Game, initialize_game_service

WORDS = [
    "abbey", "added", "adept", "admit", "adorn", "adult", "affix", "afire",
    "after", "aging", "agony", "ahead", "crane", "grift", "haste", "heart",
    "hours", "larva", "laugh", "lease", "level", "pasta", "preen", "raise",
    "sleep", "slept", "sloop", "slump", "spell", "stare",
]


@pytest.fixture
def dictionary():
    return Dictionary(WORDS, rng=random.Random(1234))


@pytest.fixture
def make_game(dictionary):
    def _make_game(answer="slump", difficulty=GameDifficulty.EASY):
        return Game(GameOptions(answer=answer, difficulty=difficulty), dictionary=dictionary)
    return _make_game


@pytest.fixture
def game_service(dictionary):
    return initialize_game_service(dictionary)


@pytest.fixture
def app(game_service):
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
