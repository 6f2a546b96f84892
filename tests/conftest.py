import random

import pytest

from wordgame import create_app
from wordgame.config import TestingConfig
from wordgame.services.word_source import WordSource

SECRET_WORDS = ["CRANE", "SPEED", "ALLOW"]
LEGAL_WORDS = ["ERASE", "LOLLY", "EERIE", "ABOUT", "BEGIN", "DREAM", "FLOOR", "GHOST", "HOUSE"]


@pytest.fixture
def word_source():
    return WordSource(SECRET_WORDS, LEGAL_WORDS, rng=random.Random(7))


@pytest.fixture
def app_and_socketio(tmp_path, word_source):
    class Config(TestingConfig):
        LOG_DIR = str(tmp_path / "logs")

    return create_app(Config, word_source=word_source)


@pytest.fixture
def app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture
def socketio(app_and_socketio):
    return app_and_socketio[1]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def game_service(app):
    return app.extensions['game_service']
