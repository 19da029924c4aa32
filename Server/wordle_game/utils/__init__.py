"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game_service, websocket_game_required
from .helpers import get_user_identity, parse_answer_word_index
from .game_logger import game_logger

__all__ = [
    'require_game_service', 'websocket_game_required',
    'get_user_identity', 'parse_answer_word_index', 'game_logger'
]
