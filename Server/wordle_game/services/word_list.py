"""
Word List

Read-only answer and candidate word collections used by the game.
"""

from typing import FrozenSet, Iterable, Optional, Tuple
from ..config.game_settings import ANSWER_WORDS, CANDIDATE_WORDS, WORD_LENGTH


class WordList:
    """
    Static pair of word collections.

    answer_words are the possible targets and are indexed by a game's
    answer_word_index; candidate_words are additional accepted guesses.
    """

    def __init__(self, answer_words: Iterable[str], candidate_words: Iterable[str] = ()):
        self.answer_words: Tuple[str, ...] = tuple(answer_words)
        self.candidate_words: Tuple[str, ...] = tuple(candidate_words)

        if not self.answer_words:
            raise ValueError("Answer word list cannot be empty")

        for word in self.answer_words:
            if len(word) != WORD_LENGTH:
                raise ValueError(f"Answer word '{word}' is not {WORD_LENGTH} characters long")

        self._accepted: FrozenSet[str] = frozenset(self.answer_words) | frozenset(self.candidate_words)

    def __len__(self) -> int:
        return len(self.answer_words)

    def answer_at(self, index: int) -> str:
        return self.answer_words[index]

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.answer_words)

    def is_valid_word(self, word: str) -> bool:
        """True if the word has the right length and is an answer or candidate word."""
        return len(word) == WORD_LENGTH and word in self._accepted


_default_word_list: Optional[WordList] = None


def get_default_word_list() -> WordList:
    """Word list built from the configured JSON word files."""
    global _default_word_list
    if _default_word_list is None:
        _default_word_list = WordList(ANSWER_WORDS, CANDIDATE_WORDS)
    return _default_word_list


def resolve_word_list(word_list: Optional[WordList] = None) -> WordList:
    return get_default_word_list() if word_list is None else word_list
