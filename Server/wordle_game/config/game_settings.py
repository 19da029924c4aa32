"""
Game Configuration Constants Module

This module defines the game rules and the word database. The answer words
(valid puzzle targets) and the candidate words (additional accepted guesses)
are loaded from JSON files that live next to this module.
"""

import json
import os
from typing import List, Final

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every answer and guess.
"""

MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

REVEAL_STEP_DURATION_MS: Final[int] = 250
"""Time between two letters of a guess being revealed."""

END_OF_GAME_DURATION_MS: Final[int] = 1000
"""Pause after the last guess before the play-again control appears."""

SUCCESS_MESSAGES: Final[List[str]] = [
    "Genius",
    "Magnificent",
    "Impressive",
    "Splendid",
    "Great",
    "Phew",
]

LOST_MESSAGE: Final[str] = "Sorry, you lost :("


def _load_word_list(file_name: str) -> List[str]:
    """
    Load a word list from a JSON file in the config directory.

    Args:
        file_name: Name of the JSON file holding an array of words

    Returns:
        List[str]: List of lowercase words in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, file_name)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_name}: {e}")

    if not isinstance(word_list, list):
        raise ValueError(f"{file_name} must contain an array of words")

    if not word_list:
        raise ValueError(f"Word list in {file_name} cannot be empty")

    lowercase_words = [str(word).strip().lower() for word in word_list]

    for word in lowercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' in {file_name} is not {WORD_LENGTH} characters long")
        if not word.isalpha() or not word.isascii():
            raise ValueError(f"Word '{word}' in {file_name} contains non-alphabetic characters")

    return lowercase_words


# Words that can be picked as the hidden target
ANSWER_WORDS: Final[List[str]] = _load_word_list('answers.json')

# Additional words accepted as guesses
CANDIDATE_WORDS: Final[List[str]] = _load_word_list('candidates.json')


def validate_word_list_integrity(answer_words: List[str] = None,
                                 candidate_words: List[str] = None) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only lowercase a-z allowed
    3. Uniqueness validation: No duplicate answer words

    Returns:
        bool: True if the word lists pass all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if answer_words is None:
        answer_words = ANSWER_WORDS
    if candidate_words is None:
        candidate_words = CANDIDATE_WORDS

    if not answer_words:
        raise ValueError("Answer word list cannot be empty")

    for name, words in (("answer", answer_words), ("candidate", candidate_words)):
        for index, word in enumerate(words):
            if len(word) != WORD_LENGTH:
                raise ValueError(f"{name.capitalize()} word at index {index} '{word}' is not {WORD_LENGTH} characters long")

            if not all('a' <= char <= 'z' for char in word):
                raise ValueError(f"{name.capitalize()} word at index {index} '{word}' is not lowercase a-z")

    if len(answer_words) != len(set(answer_words)):
        duplicates = sorted({word for word in answer_words if answer_words.count(word) > 1})
        raise ValueError(f"Duplicate words found in answer list: {duplicates}")

    return True


def get_word_statistics(answer_words: List[str] = None) -> dict:
    """
    Analyzes the answer words and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of answer words
            - total_candidates: Number of extra accepted guesses
            - avg_vowel_count: Average vowels per answer word
            - letter_frequency: Distribution of letters across all answer words
            - most_common_letters: Five most frequent letters
    """
    if answer_words is None:
        answer_words = ANSWER_WORDS

    if not answer_words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in answer_words)

    letter_frequency = {}
    for word in answer_words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(answer_words),
        "total_candidates": len(CANDIDATE_WORDS),
        "avg_vowel_count": round(total_vowels / len(answer_words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
