"""
Game Service

Manages game sessions. Each session holds one GameState which is only ever
replaced through the game reducer.
"""

import threading
import time
import uuid
from dataclasses import asdict, dataclass
from typing import Dict, Optional
from ..models.actions import Action, ActionType, create_animation_step_action, create_start_game_action
from ..models.game import GameState, GameView, INITIAL_GAME_STATE, animation_step_to_dict
from .game_reducer import transition
from .hints import compute_guess_hints
from .selectors import (
    select_target_word, select_game_over, select_game_won, select_keyboard_hints,
    select_current_guess_view_state, select_grid_view_state, select_show_next_game_button,
    select_end_game_message, select_submit_invalid_word, select_animation_tick
)
from .word_list import WordList, get_default_word_list

MS_PER_DAY = 86_400_000


def daily_answer_word_index(word_count: int, now_ms: Optional[int] = None) -> int:
    """Index of today's word: whole days since the epoch, wrapped to the word count."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return (now_ms // MS_PER_DAY) % word_count


@dataclass
class DispatchResult:
    """Outcome of dispatching one action to a game session."""
    state: GameState
    changed: bool
    invalid_submission: bool = False
    game_ended: bool = False


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Routing actions through the game reducer
    - Building client view state without exposing the answer mid-game
    """

    def __init__(self, word_list: Optional[WordList] = None):
        self.games: Dict[str, GameState] = {}  # Store active games by game_id
        self.word_list = word_list if word_list is not None else get_default_word_list()
        self._lock = threading.Lock()

    def create_new_game(self, answer_word_index: Optional[int] = None) -> str:
        """
        Creates a new game session.

        Args:
            answer_word_index: Index of the answer word, today's word when omitted

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If answer_word_index is outside the answer word list
        """
        if answer_word_index is None:
            answer_word_index = daily_answer_word_index(len(self.word_list))
        elif not self.word_list.is_valid_index(answer_word_index):
            raise ValueError(f"Answer word index must be between 0 and {len(self.word_list) - 1}")

        game_id = str(uuid.uuid4())
        state = transition(INITIAL_GAME_STATE, create_start_game_action(answer_word_index), self.word_list)

        with self._lock:
            self.games[game_id] = state
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        return self.games.get(game_id)

    def dispatch(self, game_id: str, action: Action) -> Optional[DispatchResult]:
        """
        Applies an action to a game session.

        Args:
            game_id: Unique game identifier
            action: Action to apply

        Returns:
            DispatchResult or None if game not found
        """
        with self._lock:
            state = self.games.get(game_id)
            if state is None:
                return None

            invalid_submission = (
                action.type == ActionType.SUBMIT_GUESS
                and select_submit_invalid_word(state, self.word_list)
            )
            next_state = transition(state, action, self.word_list)
            self.games[game_id] = next_state

        return self._result(state, next_state, invalid_submission)

    def dispatch_animation_step(self, game_id: str, expected_tick: int) -> Optional[DispatchResult]:
        """
        Advances a game's animation only if its current step carries expected_tick.

        The tick check and the transition happen under one lock, so a timer
        armed for a step that has since been replaced never advances the
        step that replaced it.

        Returns:
            DispatchResult, or None if the game is gone or the tick is stale
        """
        with self._lock:
            state = self.games.get(game_id)
            if state is None or select_animation_tick(state) != expected_tick:
                return None

            next_state = transition(state, create_animation_step_action(), self.word_list)
            self.games[game_id] = next_state

        return self._result(state, next_state)

    def _result(self, state: GameState, next_state: GameState,
                invalid_submission: bool = False) -> DispatchResult:
        was_over = select_game_over(state, self.word_list)
        return DispatchResult(
            state=next_state,
            changed=next_state != state,
            invalid_submission=invalid_submission,
            game_ended=not was_over and select_game_over(next_state, self.word_list),
        )

    def get_game_view(self, game_id: str) -> Optional[GameView]:
        """
        Returns the derived view state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameView object or None if game not found
        """
        state = self.get_game_state(game_id)
        if state is None:
            return None

        target = select_target_word(state, self.word_list)
        game_over = select_game_over(state, self.word_list)

        return GameView(
            game_id=game_id,
            answer_word_index=state.answer_word_index,
            guesses=list(state.guesses),
            guess_hints=[[hint.value for hint in compute_guess_hints(guess, target)] for guess in state.guesses],
            current_guess=state.current_guess,
            current_guess_cells=[asdict(cell) for cell in select_current_guess_view_state(state, self.word_list)],
            grid=[[asdict(cell) for cell in row] for row in select_grid_view_state(state, self.word_list)],
            keyboard_hints={
                letter: hint.value for letter, hint in select_keyboard_hints(state, self.word_list).items()
            },
            game_over=game_over,
            won=select_game_won(state, self.word_list),
            animation=animation_step_to_dict(state.animation_step),
            show_next_game_button=select_show_next_game_button(state, self.word_list),
            message=select_end_game_message(state, self.word_list),
            answer=target if game_over else None,
        )

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False

    def active_game_count(self) -> int:
        return len(self.games)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_list: Optional[WordList] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_list)
    return _game_service
