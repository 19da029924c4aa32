"""
Service Decorators

Contains decorators shared by HTTP endpoints and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game_service(f):
    """
    Decorator for HTTP endpoints that need the game service.

    The service is passed to the endpoint as the game_service keyword.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events whose payload must name a game."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        if not args or not isinstance(args[0], dict) or not args[0].get('game_id'):
            emit('error', {'error': 'Game ID is required'})
            return

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function
