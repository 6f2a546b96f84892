"""
WebSocket Event Handlers

Pushes game state to rendering clients in real time. Every client that joins
a game's room receives the state after each scored guess.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room

from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import error_payload


def game_room(game_id: str) -> str:
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None, game_id=None):
        """Join a game room and receive its current state."""
        join_room(game_room(game_id))
        game_logger.log_user_action(request, 'join_game', game_id)
        emit('game_state', {'success': True, 'state': asdict(game_service.get_game_state(game_id))})

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None, game_id=None):
        """Stop receiving updates for a game."""
        leave_room(game_room(game_id))
        game_logger.log_user_action(request, 'leave_game', game_id)

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, game_service=None, game_id=None):
        """Score a guess and broadcast the new state to the game room."""
        guess = data.get('guess')
        try:
            game_logger.log_user_action(request, 'ws_submit_guess', game_id, guess=guess)

            is_valid, error = game_service.is_valid_guess(game_id, guess)
            if not is_valid:
                error_response = error_payload(error)
                game_logger.log_server_response(request, 'ws_submit_guess', False, error_response, game_id)
                emit('error', error_response)
                return

            result = game_service.make_guess(game_id, guess)
            if result is None:
                emit('error', error_payload('Failed to process guess'))
                return

            feedback, state = result
            response_data = {
                'success': True,
                'guess': guess.strip().upper(),
                'feedback': feedback,
                'state': asdict(state)
            }
            game_logger.log_server_response(request, 'ws_submit_guess', True, response_data, game_id)

            # The sender gets the update even if it never joined the room
            join_room(game_room(game_id))
            emit('game_state_update', response_data, to=game_room(game_id))

            if state.game_over:
                event = 'game_won' if state.won else 'game_lost'
                game_logger.log_game_event(
                    game_id, event, request.remote_addr,
                    turns_used=state.num_guesses, secret_word=state.answer
                )

        except Exception as e:
            game_logger.log_error(request, e, 'ws_submit_guess', game_id)
            emit('error', error_payload(str(e)))
