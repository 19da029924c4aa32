"""
Selectors

Read-only projections from GameState to the facts a client renders.
Nothing here is cached on the state; callers own whatever they derive.
"""

from typing import Dict, List, Optional
from ..config.game_settings import (
    WORD_LENGTH, MAX_GUESSES, REVEAL_STEP_DURATION_MS, SUCCESS_MESSAGES, LOST_MESSAGE
)
from ..models.actions import Action, create_next_game_action, create_reset_game_action
from ..models.game import GameState, AnimationStep, RevealHintsAnimation, CurrentGuessCell, Hint
from .hints import compute_guess_hints, compute_keyboard_hints
from .word_list import WordList, resolve_word_list


def select_target_word(state: GameState, word_list: Optional[WordList] = None) -> str:
    word_list = resolve_word_list(word_list)
    return word_list.answer_at(state.answer_word_index)


def select_guesses(state: GameState) -> List[str]:
    return list(state.guesses)


def select_current_guess(state: GameState) -> str:
    return state.current_guess


def select_game_over(state: GameState, word_list: Optional[WordList] = None) -> bool:
    """Game is finished if maximum guesses reached or last guess is the target word."""
    if len(state.guesses) >= MAX_GUESSES:
        return True
    return bool(state.guesses) and state.guesses[-1] == select_target_word(state, word_list)


def select_game_won(state: GameState, word_list: Optional[WordList] = None) -> bool:
    return (
        select_game_over(state, word_list)
        and bool(state.guesses)
        and state.guesses[-1] == select_target_word(state, word_list)
    )


def select_animation_step(state: GameState) -> Optional[AnimationStep]:
    return state.animation_step


def select_animation_tick(state: GameState) -> Optional[int]:
    return state.animation_step.tick if state.animation_step else None


def select_animation_duration_ms(state: GameState) -> int:
    if state.animation_step is None:
        return REVEAL_STEP_DURATION_MS
    return state.animation_step.duration_ms


def select_keyboard_hints(state: GameState, word_list: Optional[WordList] = None) -> Dict[str, Hint]:
    return compute_keyboard_hints(state.guesses, select_target_word(state, word_list))


def select_submit_invalid_word(state: GameState, word_list: Optional[WordList] = None) -> bool:
    """True when the board accepts input but submitting the current guess would be rejected."""
    word_list = resolve_word_list(word_list)
    if state.animation_step is not None or select_game_over(state, word_list):
        return False
    return not word_list.is_valid_word(state.current_guess)


def select_current_guess_view_state(state: GameState,
                                    word_list: Optional[WordList] = None) -> List[CurrentGuessCell]:
    word_list = resolve_word_list(word_list)
    step = state.animation_step
    guess = state.current_guess

    if not isinstance(step, RevealHintsAnimation):
        invalid_word = len(guess) == WORD_LENGTH and not word_list.is_valid_word(guess)
        return [
            CurrentGuessCell(letter=guess[i] if i < len(guess) else None, invalid_word=invalid_word)
            for i in range(WORD_LENGTH)
        ]

    hints = compute_guess_hints(guess, select_target_word(state, word_list))
    return [
        CurrentGuessCell(
            letter=guess[i],
            hint=hint.value if i <= step.reveal_index else None,
            collapse=i == step.collapse_index,
            reveal=i == step.reveal_index,
        )
        for i, hint in enumerate(hints)
    ]


def select_grid_view_state(state: GameState,
                           word_list: Optional[WordList] = None) -> List[List[CurrentGuessCell]]:
    """
    Full board: committed guesses, the current guess row, then empty rows.

    The winning row is flagged with wave. The board always has MAX_GUESSES
    rows, so the current guess row is dropped once every row is used.
    """
    word_list = resolve_word_list(word_list)
    target = select_target_word(state, word_list)
    wave = select_game_won(state, word_list)

    rows = [
        [
            CurrentGuessCell(letter=letter, hint=hint.value, wave=wave and row == len(state.guesses) - 1)
            for letter, hint in zip(guess, compute_guess_hints(guess, target))
        ]
        for row, guess in enumerate(state.guesses)
    ]
    rows.append(select_current_guess_view_state(state, word_list))
    while len(rows) < MAX_GUESSES:
        rows.append([CurrentGuessCell() for _ in range(WORD_LENGTH)])

    return rows[:MAX_GUESSES]


def select_show_next_game_button(state: GameState, word_list: Optional[WordList] = None) -> bool:
    return select_game_over(state, word_list) and state.animation_step is None


def select_play_again_action(state: GameState, word_list: Optional[WordList] = None) -> Action:
    """A won game moves on to the next word, a lost one is retried."""
    if select_game_won(state, word_list):
        return create_next_game_action()
    return create_reset_game_action()


def select_end_game_message(state: GameState, word_list: Optional[WordList] = None) -> Optional[str]:
    if not select_game_over(state, word_list):
        return None
    if select_game_won(state, word_list):
        return SUCCESS_MESSAGES[len(state.guesses) - 1]
    return LOST_MESSAGE
