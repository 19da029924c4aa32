"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    Hint, RevealHintsAnimation, EndOfGameAnimation, AnimationStep, GameState,
    INITIAL_GAME_STATE, CurrentGuessCell, GameView
)
from .actions import Action, ActionType, action_from_key, action_from_dict

__all__ = [
    'Hint', 'RevealHintsAnimation', 'EndOfGameAnimation', 'AnimationStep', 'GameState',
    'INITIAL_GAME_STATE', 'CurrentGuessCell', 'GameView',
    'Action', 'ActionType', 'action_from_key', 'action_from_dict'
]
