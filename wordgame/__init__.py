"""
Word Guessing Game Server Package

A single-player five-letter word guessing game: a pure game core
(models), a session layer on top of it (services) and the HTTP and
WebSocket surface that rendering clients talk to.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, word_source=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        word_source: WordSource to play with; loaded from the configured
            word list files when omitted

    Returns:
        Flask application instance and its SocketIO server
    """
    from .services.game_service import init_game_service
    from .services.word_source import WordSource
    from .utils.game_logger import game_logger

    app = Flask(__name__)
    app.config.from_object(config_class)

    game_logger.configure(app.config['LOG_DIR'], app.config['LOG_LEVEL'])

    if word_source is None:
        word_source = WordSource.from_files(app.config['SECRET_WORDS_FILE'], app.config['LEGAL_WORDS_FILE'])
    init_game_service(app, word_source)

    # Initialize extensions
    CORS(app, origins=app.config['CORS_ORIGINS'])
    socketio = SocketIO(app, cors_allowed_origins=app.config['CORS_ORIGINS'], logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    return app, socketio
