"""
Tests for the game session service.
"""

import pytest

from wordle_game.config.game_settings import WORD_LENGTH
from wordle_game.models.actions import (
    action_from_key, create_animation_step_action, create_reset_game_action
)
from wordle_game.models.game import GameState
from wordle_game.services.game_service import GameService, daily_answer_word_index, MS_PER_DAY


def _type(service, game_id, word):
    for letter in word:
        service.dispatch(game_id, action_from_key(letter))


def _submit_and_animate(service, game_id):
    results = [service.dispatch(game_id, action_from_key("Enter"))]
    while service.get_game_state(game_id).animation_step is not None:
        results.append(service.dispatch(game_id, create_animation_step_action()))
    return results


class TestDailyWord:

    def test_daily_index(self):
        assert daily_answer_word_index(5, now_ms=0) == 0
        assert daily_answer_word_index(5, now_ms=MS_PER_DAY * 7 + 1234) == 2
        assert daily_answer_word_index(5, now_ms=MS_PER_DAY - 1) == 0

    def test_daily_index_uses_current_time(self):
        assert 0 <= daily_answer_word_index(5) < 5


class TestGameService:

    def test_create_game_with_index(self, game_service):
        game_id = game_service.create_new_game(2)
        assert game_service.get_game_state(game_id) == GameState(answer_word_index=2)
        assert game_service.active_game_count() == 1

    def test_create_game_defaults_to_daily_word(self, word_list):
        service = GameService(word_list)
        state = service.get_game_state(service.create_new_game())
        assert 0 <= state.answer_word_index < len(word_list)

    def test_create_game_rejects_bad_index(self, game_service):
        with pytest.raises(ValueError):
            game_service.create_new_game(99)
        with pytest.raises(ValueError):
            game_service.create_new_game(-1)

    def test_dispatch_unknown_game(self, game_service):
        assert game_service.dispatch("missing", action_from_key("a")) is None
        assert game_service.get_game_view("missing") is None

    def test_dispatch_reports_changes(self, game_service):
        game_id = game_service.create_new_game(0)

        result = game_service.dispatch(game_id, action_from_key("c"))
        assert result.changed is True
        assert result.state.current_guess == "c"

        result = game_service.dispatch(game_id, action_from_key("1"))
        assert result.changed is False

    def test_invalid_submission_is_flagged(self, game_service):
        game_id = game_service.create_new_game(0)
        _type(game_service, game_id, "xyzzy")

        result = game_service.dispatch(game_id, action_from_key("Enter"))
        assert result.invalid_submission is True
        assert result.changed is False
        assert result.state.current_guess == "xyzzy"

    def test_valid_submission_is_not_flagged(self, game_service):
        game_id = game_service.create_new_game(0)
        _type(game_service, game_id, "radar")

        result = game_service.dispatch(game_id, action_from_key("Enter"))
        assert result.invalid_submission is False
        assert result.changed is True

    def test_game_ended_is_reported_once(self, game_service):
        game_id = game_service.create_new_game(0)
        _type(game_service, game_id, "crane")

        results = _submit_and_animate(game_service, game_id)
        assert len(results) == WORD_LENGTH + 3
        assert [r.game_ended for r in results].count(True) == 1
        assert results[WORD_LENGTH + 1].game_ended is True

    def test_view_hides_answer_until_game_over(self, game_service):
        game_id = game_service.create_new_game(0)
        _type(game_service, game_id, "radar")
        _submit_and_animate(game_service, game_id)

        view = game_service.get_game_view(game_id)
        assert view.answer is None
        assert view.guesses == ["radar"]
        assert view.guess_hints == [["~", "~", "-", "-", "-"]]
        assert view.keyboard_hints == {"r": "~", "a": "~", "d": "-"}
        assert view.game_over is False
        assert len(view.grid) == 6

        _type(game_service, game_id, "crane")
        _submit_and_animate(game_service, game_id)

        view = game_service.get_game_view(game_id)
        assert view.answer == "crane"
        assert view.won is True
        assert view.message == "Magnificent"
        assert view.show_next_game_button is True

    def test_animation_step_with_current_tick_advances(self, game_service):
        game_id = game_service.create_new_game(0)
        _type(game_service, game_id, "radar")
        game_service.dispatch(game_id, action_from_key("Enter"))

        result = game_service.dispatch_animation_step(game_id, 1)
        assert result.changed is True
        assert result.state.animation_step.reveal_index == 0
        assert result.state.animation_step.tick == 2

    def test_animation_step_with_stale_tick_is_dropped(self, game_service):
        game_id = game_service.create_new_game(0)
        _type(game_service, game_id, "radar")
        game_service.dispatch(game_id, action_from_key("Enter"))
        game_service.dispatch(game_id, create_animation_step_action())

        assert game_service.dispatch_animation_step(game_id, 1) is None
        step = game_service.get_game_state(game_id).animation_step
        assert step.reveal_index == 0
        assert step.tick == 2

    def test_animation_step_without_animation_or_game(self, game_service):
        game_id = game_service.create_new_game(0)

        assert game_service.dispatch_animation_step(game_id, 0) is None
        assert game_service.dispatch_animation_step("missing", 1) is None

    def test_view_reports_animation(self, game_service):
        game_id = game_service.create_new_game(0)
        _type(game_service, game_id, "radar")
        game_service.dispatch(game_id, action_from_key("Enter"))

        animation = game_service.get_game_view(game_id).animation
        assert animation["type"] == "RevealHints"
        assert animation["reveal_index"] == -1
        assert animation["tick"] == 1

    def test_reset_clears_game(self, game_service):
        game_id = game_service.create_new_game(1)
        _type(game_service, game_id, "rad")

        result = game_service.dispatch(game_id, create_reset_game_action())
        assert result.state == GameState(answer_word_index=1)

    def test_delete_game(self, game_service):
        game_id = game_service.create_new_game(0)

        assert game_service.delete_game(game_id) is True
        assert game_service.get_game_state(game_id) is None
        assert game_service.delete_game(game_id) is False
