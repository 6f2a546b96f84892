"""
Game Lookup Decorators

Contains decorators for HTTP and WebSocket handlers that need a game service
or an existing game.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit

from .helpers import error_payload


def require_game_service(f):
    """
    Decorator for HTTP endpoints that need the game service.

    Passes the service to the view as the game_service keyword argument.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify(error_payload('Game service unavailable')), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events whose payload names an existing game."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', error_payload('Game service unavailable'))
            return

        data = args[0] if args and isinstance(args[0], dict) else {}
        game_id = data.get('game_id')
        if not game_id:
            emit('error', error_payload('Game ID is required'))
            return

        if game_service.get_round(game_id) is None:
            emit('error', error_payload('Game not found'))
            return

        kwargs['game_service'] = game_service
        kwargs['game_id'] = game_id
        return f(data, **kwargs)

    return decorated_function
