"""
WebSocket Event Handlers

Real-time game sessions. Every client in a game room receives the full view
state after each transition. The server owns the animation timer for these
clients: while a state carries an animation step it re-dispatches
AnimationStep once the step's duration has elapsed.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..models.actions import action_from_dict
from ..services.game_service import get_game_service
from ..services.selectors import select_animation_tick, select_animation_duration_ms
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def _room(game_id):
    return f"game_{game_id}"


def _game_state_payload(game_service, game_id, result=None):
    payload = {'state': asdict(game_service.get_game_view(game_id))}
    if result is not None:
        payload['changed'] = result.changed
        payload['invalid_submission'] = result.invalid_submission
    return payload


def _log_game_end(game_service, game_id, result, user_ip):
    if not result.game_ended:
        return
    view = game_service.get_game_view(game_id)
    game_logger.log_game_event(
        game_id, 'game_won' if view.won else 'game_lost', user_ip,
        guesses_used=len(view.guesses), target_word=view.answer
    )


def schedule_animation_step(socketio, game_service, game_id, user_ip=None):
    """
    Arm the timer for the game's current animation step.

    The background task only advances the animation if the step it was
    armed for is still current; any other transition in between (a reset,
    another timer) makes it a no-op.
    """
    state = game_service.get_game_state(game_id)
    if state is None:
        return None

    tick = select_animation_tick(state)
    if tick is None:
        return None

    delay_seconds = select_animation_duration_ms(state) / 1000

    def advance():
        socketio.sleep(delay_seconds)

        result = game_service.dispatch_animation_step(game_id, tick)
        if result is None:
            return

        _log_game_end(game_service, game_id, result, user_ip)
        socketio.emit('game_state', _game_state_payload(game_service, game_id), room=_room(game_id))
        schedule_animation_step(socketio, game_service, game_id, user_ip)

    return socketio.start_background_task(advance)


def register_websocket_handlers(socketio, auto_advance_animations=True):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.debug(f"WebSocket connected: {request.sid}")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection."""
        game_logger.logger.debug(f"WebSocket disconnected: {request.sid}")

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None):
        """Join a game room for real-time updates."""
        game_id = data['game_id']

        if game_service.get_game_state(game_id) is None:
            emit('error', {'error': 'Game not found'})
            return

        join_room(_room(game_id))
        game_logger.log_user_action(request, 'join_game', game_id)

        emit('game_state', _game_state_payload(game_service, game_id))

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None):
        """Leave a game room."""
        game_id = data['game_id']
        leave_room(_room(game_id))
        game_logger.log_user_action(request, 'leave_game', game_id)
        emit('left_game', {'game_id': game_id})

    @socketio.on('dispatch_action')
    @websocket_game_required
    def handle_dispatch_action(data, game_service=None):
        """Apply an action to a game and broadcast the new view state."""
        game_id = data['game_id']

        try:
            action = action_from_dict(data.get('action', {'key': data.get('key')}))
        except ValueError as e:
            emit('error', {'error': str(e)})
            return

        try:
            game_logger.log_user_action(request, 'dispatch_action', game_id, action_type=action.type.value)

            result = game_service.dispatch(game_id, action)
            if result is None:
                emit('error', {'error': 'Game not found'})
                return

            if result.invalid_submission:
                game_logger.log_game_event(
                    game_id, 'invalid_word', request.remote_addr,
                    attempted_guess=result.state.current_guess
                )
                emit('invalid_word', {'game_id': game_id, 'guess': result.state.current_guess})

            _log_game_end(game_service, game_id, result, request.remote_addr)

            if result.changed:
                join_room(_room(game_id))
                socketio.emit('game_state', _game_state_payload(game_service, game_id, result), room=_room(game_id))
                if auto_advance_animations:
                    schedule_animation_step(socketio, game_service, game_id, request.remote_addr)
            else:
                emit('game_state', _game_state_payload(game_service, game_id, result))

        except Exception as e:
            game_logger.log_error(request, e, 'dispatch_action', game_id)
            emit('error', {'error': str(e)})
