"""
Services Package

Contains the game logic: word lists, hint engine, reducer, selectors and
the game session service.
"""

from .word_list import WordList, get_default_word_list
from .hints import compute_guess_hints, compute_keyboard_hints
from .game_reducer import transition
from .game_service import GameService, DispatchResult, get_game_service, initialize_game_service

__all__ = [
    'WordList', 'get_default_word_list',
    'compute_guess_hints', 'compute_keyboard_hints',
    'transition',
    'GameService', 'DispatchResult', 'get_game_service', 'initialize_game_service'
]
