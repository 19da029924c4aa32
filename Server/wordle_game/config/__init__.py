"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, timings and the word database
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, MAX_GUESSES, REVEAL_STEP_DURATION_MS, END_OF_GAME_DURATION_MS,
    ANSWER_WORDS, CANDIDATE_WORDS, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_GUESSES', 'REVEAL_STEP_DURATION_MS', 'END_OF_GAME_DURATION_MS',
    'ANSWER_WORDS', 'CANDIDATE_WORDS', 'validate_word_list_integrity', 'get_word_statistics'
]
