"""
Game Controller

Handles all game-related HTTP endpoints. Clients drive the game by posting
actions and re-read the returned view state after every one of them;
while an animation is running they post AnimationStep once its duration
has elapsed.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import get_word_statistics
from ..models.actions import action_from_dict
from ..services.selectors import select_play_again_action
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_answer_word_index

game_bp = Blueprint('game', __name__)


def _log_game_end(game_service, game_id, result, trigger):
    """Log a win or loss when the last dispatched action ended the game."""
    if not result.game_ended:
        return

    view = game_service.get_game_view(game_id)
    game_logger.log_game_event(
        game_id, 'game_won' if view.won else 'game_lost', request.remote_addr,
        guesses_used=len(view.guesses), target_word=view.answer, trigger=trigger
    )


def _dispatch(game_service, game_id, action, log_action):
    """Apply an action and build the JSON response for it."""
    result = game_service.dispatch(game_id, action)
    if result is None:
        error_response = {
            'success': False,
            'error': 'Game not found'
        }
        game_logger.log_server_response(request, log_action, False, error_response, game_id)
        return jsonify(error_response), 404

    if result.invalid_submission:
        game_logger.log_game_event(
            game_id, 'invalid_word', request.remote_addr,
            attempted_guess=result.state.current_guess
        )

    _log_game_end(game_service, game_id, result, log_action)

    response_data = {
        'success': True,
        'changed': result.changed,
        'invalid_submission': result.invalid_submission,
        'state': asdict(game_service.get_game_view(game_id))
    }

    game_logger.log_server_response(
        request, log_action, True, response_data, game_id,
        action_type=action.type.value, changed=result.changed
    )

    return jsonify(response_data)


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session, on today's word unless an index is given."""
    try:
        data = request.get_json(silent=True) or {}

        try:
            if not isinstance(data, dict):
                raise ValueError("Request body must be a JSON object")
            answer_word_index = parse_answer_word_index(data.get('answer_word_index'))
            game_logger.log_user_action(request, 'new_game', answer_word_index=answer_word_index)
            game_id = game_service.create_new_game(answer_word_index)
        except ValueError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        view = game_service.get_game_view(game_id)
        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(view)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            answer_word_index=view.answer_word_index
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game view state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        view = game_service.get_game_view(game_id)
        if view is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'state': asdict(view)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            guesses_count=len(view.guesses), game_over=view.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/action', methods=['POST'])
@require_game_service
def dispatch_action(game_id, game_service):
    """Dispatch one action ({"type": ...} or {"key": ...}) to a game."""
    try:
        data = request.get_json(silent=True)

        try:
            action = action_from_dict(data)
        except ValueError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'dispatch_action', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'dispatch_action', game_id, action_type=action.type.value)

        return _dispatch(game_service, game_id, action, 'dispatch_action')

    except Exception as e:
        game_logger.log_error(request, e, 'dispatch_action', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'dispatch_action', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/play_again', methods=['POST'])
@require_game_service
def play_again(game_id, game_service):
    """Next word after a win, same word again after a loss."""
    try:
        game_logger.log_user_action(request, 'play_again', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'play_again', False, error_response, game_id)
            return jsonify(error_response), 404

        action = select_play_again_action(state, game_service.word_list)
        return _dispatch(game_service, game_id, action, 'play_again')

    except Exception as e:
        game_logger.log_error(request, e, 'play_again', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'play_again', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)

        response_data['error'] = 'Game not found'
        return jsonify(response_data), 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': game_service.active_game_count(),
            'word_statistics': {
                key: value for key, value in get_word_statistics(list(game_service.word_list.answer_words)).items()
                if key != 'letter_frequency'
            },
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
