"""
Hint Engine

Computes per-letter feedback for a guess and the aggregated keyboard hints.
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional
from ..models.game import Hint

_HINT_RANK = {
    Hint.WRONG_LETTER: 0,
    Hint.WRONG_POSITION: 1,
    Hint.CORRECT_POSITION: 2,
}


def compute_guess_hints(guess: str, target: str) -> List[Hint]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are marked first and consume their target letter, so a
    repeated guess letter is never reported more often than it occurs in
    the target.
    """
    if len(guess) != len(target):
        raise ValueError(f"guess length ({len(guess)}) != target length ({len(target)})")

    hints: List[Optional[Hint]] = [None] * len(guess)
    remaining = Counter()

    # First pass: exact position matches
    for i, (letter, target_letter) in enumerate(zip(guess, target)):
        if letter == target_letter:
            hints[i] = Hint.CORRECT_POSITION
        else:
            remaining[target_letter] += 1

    # Second pass: present letters and misses
    for i, letter in enumerate(guess):
        if hints[i] is not None:
            continue
        if remaining[letter] > 0:
            hints[i] = Hint.WRONG_POSITION
            remaining[letter] -= 1
        else:
            hints[i] = Hint.WRONG_LETTER

    return hints


def compute_keyboard_hints(guesses: Iterable[str], target: str) -> Dict[str, Hint]:
    """
    Best hint seen for every letter guessed so far.

    Status can only progress in priority order: a letter at CORRECT_POSITION
    is never downgraded by a later guess.
    """
    letter_hints: Dict[str, Hint] = {}

    for guess in guesses:
        for letter, hint in zip(guess, compute_guess_hints(guess, target)):
            current = letter_hints.get(letter)
            if current is None or _HINT_RANK[hint] > _HINT_RANK[current]:
                letter_hints[letter] = hint

    return letter_hints
