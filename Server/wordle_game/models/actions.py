"""
Game Actions

Discrete inputs accepted by the game reducer, plus helpers that build them
from keyboard keys and JSON payloads.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ActionType(Enum):
    NOOP = "Noop"                      # Do nothing
    APPEND_LETTER = "AppendLetter"     # Append letter to current guess
    REMOVE_LETTER = "RemoveLetter"     # Remove letter from current guess
    SUBMIT_GUESS = "SubmitGuess"       # Submit guess (ENTER)
    NEXT_GAME = "NextGame"             # Advance to next answer word
    RESET_GAME = "ResetGame"           # Restart the current answer word
    ANIMATION_STEP = "AnimationStep"   # Advance animation one step
    START_GAME = "StartGame"           # Start a game on a given answer word


@dataclass(frozen=True)
class Action:
    type: ActionType
    letter: Optional[str] = None
    answer_word_index: Optional[int] = None


def create_append_letter_action(letter: str) -> Action:
    return Action(ActionType.APPEND_LETTER, letter=letter)


def create_remove_letter_action() -> Action:
    return Action(ActionType.REMOVE_LETTER)


def create_submit_guess_action() -> Action:
    return Action(ActionType.SUBMIT_GUESS)


def create_animation_step_action() -> Action:
    return Action(ActionType.ANIMATION_STEP)


def create_start_game_action(answer_word_index: int) -> Action:
    return Action(ActionType.START_GAME, answer_word_index=answer_word_index)


def create_next_game_action() -> Action:
    return Action(ActionType.NEXT_GAME)


def create_reset_game_action() -> Action:
    return Action(ActionType.RESET_GAME)


def create_noop_action() -> Action:
    return Action(ActionType.NOOP)


def action_from_key(key: str) -> Action:
    """
    Map a keyboard key to an action.

    Enter submits, Backspace removes; every other key is lowercased and
    offered as a letter, the reducer ignores anything that is not a-z.
    """
    if key in ("Enter", "\r"):
        return create_submit_guess_action()
    if key in ("Backspace", "\b"):
        return create_remove_letter_action()
    return create_append_letter_action(key.lower())


def action_from_dict(payload: Dict[str, Any]) -> Action:
    """
    Build an action from a JSON payload such as {"type": "AppendLetter", "letter": "t"}.

    A payload carrying a "key" field instead is mapped with action_from_key.

    Raises:
        ValueError: If the payload is not a dict, the type is unknown or a
            required field is missing or has the wrong type
    """
    if not isinstance(payload, dict):
        raise ValueError("Action must be an object")

    if 'key' in payload and 'type' not in payload:
        key = payload['key']
        if not isinstance(key, str) or not key:
            raise ValueError("Key must be a non-empty string")
        return action_from_key(key)

    try:
        action_type = ActionType(payload.get('type'))
    except ValueError:
        raise ValueError(f"Unknown action type: {payload.get('type')!r}")

    if action_type == ActionType.APPEND_LETTER:
        letter = payload.get('letter')
        if not isinstance(letter, str):
            raise ValueError("AppendLetter requires a 'letter' string")
        return create_append_letter_action(letter)

    if action_type == ActionType.START_GAME:
        index = payload.get('answer_word_index')
        if not isinstance(index, int) or isinstance(index, bool):
            raise ValueError("StartGame requires an integer 'answer_word_index'")
        return create_start_game_action(index)

    return Action(action_type)
