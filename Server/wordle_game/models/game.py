"""
Game Data Models

Contains all game-related data structures and enums.

GameState is immutable: the reducer always returns a new instance, so a
reader holding a state never observes a partially applied transition.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union


class Hint(Enum):
    """Per-letter feedback for a guessed letter."""
    WRONG_LETTER = "-"      # Letter is not in the word
    WRONG_POSITION = "~"    # Letter is in the word, but not in this position
    CORRECT_POSITION = "="  # Letter is in the word and in this position


@dataclass(frozen=True)
class RevealHintsAnimation:
    """Reveals the hints of the submitted guess one letter per step."""
    collapse_index: int
    reveal_index: int
    duration_ms: int
    tick: int = field(default=0, compare=False)


@dataclass(frozen=True)
class EndOfGameAnimation:
    """Pause shown after the game ends, before play-again is offered."""
    duration_ms: int
    tick: int = field(default=0, compare=False)


AnimationStep = Union[RevealHintsAnimation, EndOfGameAnimation]


@dataclass(frozen=True)
class GameState:
    """Canonical state of a single game."""
    guesses: Tuple[str, ...] = ()
    current_guess: str = ""
    answer_word_index: int = 0
    animation_step: Optional[AnimationStep] = None
    # Last animation tick handed out; survives resets so ticks never repeat
    last_tick: int = field(default=0, compare=False)


INITIAL_GAME_STATE = GameState()


def animation_step_to_dict(step: Optional[AnimationStep]) -> Optional[Dict]:
    if step is None:
        return None
    if isinstance(step, RevealHintsAnimation):
        return {
            'type': 'RevealHints',
            'tick': step.tick,
            'duration_ms': step.duration_ms,
            'collapse_index': step.collapse_index,
            'reveal_index': step.reveal_index,
        }
    return {
        'type': 'EndOfGame',
        'tick': step.tick,
        'duration_ms': step.duration_ms,
    }


@dataclass
class CurrentGuessCell:
    """View state of one letter cell on the board."""
    letter: Optional[str] = None
    hint: Optional[str] = None  # Hint value as string for JSON serialization
    collapse: bool = False
    reveal: bool = False
    invalid_word: bool = False
    wave: bool = False


@dataclass
class GameView:
    """Derived view state of a game session, ready to be sent to a client."""
    game_id: str
    answer_word_index: int
    guesses: List[str]
    guess_hints: List[List[str]]
    current_guess: str
    current_guess_cells: List[Dict]
    grid: List[List[Dict]]
    keyboard_hints: Dict[str, str]
    game_over: bool
    won: bool
    animation: Optional[Dict]
    show_next_game_button: bool
    message: Optional[str] = None
    answer: Optional[str] = None  # Only included when game is over
