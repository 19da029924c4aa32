"""
Pytest configuration for the Wordle game server tests.

Logs go to a temporary directory and every test gets a fresh game service
built on a small fixed word list, so results do not depend on the shipped
word files.
"""

import os
import tempfile
from pathlib import Path

os.environ.setdefault('LOG_DIR', str(Path(tempfile.gettempdir()) / 'wordle_game_test_logs'))

import pytest

from wordle_game import create_app
from wordle_game.config import TestingConfig
from wordle_game.models.actions import (
    action_from_key, create_animation_step_action, create_submit_guess_action
)
from wordle_game.services.game_reducer import transition
from wordle_game.services.game_service import initialize_game_service
from wordle_game.services.word_list import WordList

ANSWER_WORDS = ["crane", "pilot", "cigar", "hello", "world"]
CANDIDATE_WORDS = [
    "radar", "stare", "toast", "tears", "chair", "dance",
    "early", "heart", "brain", "about", "cream", "speed",
]


@pytest.fixture
def word_list():
    return WordList(ANSWER_WORDS, CANDIDATE_WORDS)


@pytest.fixture
def play(word_list):
    """Apply a sequence of actions and return the final state."""
    def _play(state, *actions):
        for action in actions:
            state = transition(state, action, word_list)
        return state
    return _play


@pytest.fixture
def type_word():
    """Actions that type a word letter by letter."""
    def _type_word(word):
        return [action_from_key(letter) for letter in word]
    return _type_word


@pytest.fixture
def guess(play, type_word):
    """Type, submit and fully animate one guess."""
    def _guess(state, word):
        state = play(state, *type_word(word), create_submit_guess_action())
        while state.animation_step is not None and state.current_guess:
            state = play(state, create_animation_step_action())
        return state
    return _guess


@pytest.fixture
def game_service(word_list):
    return initialize_game_service(word_list)


@pytest.fixture
def app(game_service):
    app, _ = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socketio_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
