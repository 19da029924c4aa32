"""
Game Reducer

The game state machine: transition(state, action) returns the next state.

The function is pure and total. An action whose preconditions do not hold
returns the state unchanged; nothing is raised for bad player input.
Animation timers live outside, they dispatch an AnimationStep action when
the current step's duration has elapsed.
"""

from dataclasses import replace
from typing import Optional
from ..config.game_settings import WORD_LENGTH, REVEAL_STEP_DURATION_MS, END_OF_GAME_DURATION_MS
from ..models.actions import Action, ActionType
from ..models.game import GameState, INITIAL_GAME_STATE, RevealHintsAnimation, EndOfGameAnimation
from .selectors import select_game_over
from .word_list import WordList, resolve_word_list


def _fresh_state(state: GameState, answer_word_index: int) -> GameState:
    return replace(INITIAL_GAME_STATE, answer_word_index=answer_word_index, last_tick=state.last_tick)


def _is_letter(letter: Optional[str]) -> bool:
    return isinstance(letter, str) and len(letter) == 1 and 'a' <= letter <= 'z'


def _advance_animation(state: GameState, word_list: WordList) -> GameState:
    step = state.animation_step

    if isinstance(step, EndOfGameAnimation):
        return replace(state, animation_step=None)

    collapse_index = step.collapse_index + 1
    reveal_index = step.reveal_index + 1
    tick = state.last_tick + 1

    if reveal_index < WORD_LENGTH:
        return replace(
            state,
            animation_step=RevealHintsAnimation(
                collapse_index=collapse_index,
                reveal_index=reveal_index,
                duration_ms=step.duration_ms,
                tick=tick,
            ),
            last_tick=tick,
        )

    # Every letter revealed: commit the guess
    next_state = replace(
        state,
        guesses=state.guesses + (state.current_guess,),
        current_guess="",
        animation_step=None,
    )

    if not select_game_over(next_state, word_list):
        return next_state

    return replace(
        next_state,
        animation_step=EndOfGameAnimation(duration_ms=END_OF_GAME_DURATION_MS, tick=tick),
        last_tick=tick,
    )


def transition(state: GameState, action: Action, word_list: Optional[WordList] = None) -> GameState:
    """Apply one action to a game state and return the resulting state."""
    word_list = resolve_word_list(word_list)

    # Actions permitted in any state
    if action.type == ActionType.START_GAME:
        index = action.answer_word_index
        if isinstance(index, bool) or not isinstance(index, int) or not word_list.is_valid_index(index):
            return state
        return _fresh_state(state, index)

    if action.type == ActionType.RESET_GAME:
        return _fresh_state(state, state.answer_word_index)

    if action.type == ActionType.NEXT_GAME:
        return _fresh_state(state, (state.answer_word_index + 1) % len(word_list))

    if action.type == ActionType.ANIMATION_STEP:
        if state.animation_step is None:
            return state
        return _advance_animation(state, word_list)

    if select_game_over(state, word_list) or state.animation_step is not None:
        return state

    # Actions only permitted while the game is running and nothing animates
    if action.type == ActionType.APPEND_LETTER:
        if len(state.current_guess) < WORD_LENGTH and _is_letter(action.letter):
            return replace(state, current_guess=state.current_guess + action.letter)

    elif action.type == ActionType.REMOVE_LETTER:
        if state.current_guess:
            return replace(state, current_guess=state.current_guess[:-1])

    elif action.type == ActionType.SUBMIT_GUESS:
        if word_list.is_valid_word(state.current_guess):
            tick = state.last_tick + 1
            return replace(
                state,
                animation_step=RevealHintsAnimation(
                    collapse_index=0,
                    reveal_index=-1,
                    duration_ms=REVEAL_STEP_DURATION_MS,
                    tick=tick,
                ),
                last_tick=tick,
            )

    return state
