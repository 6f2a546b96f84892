"""
Word Game Server - Main Entry Point

Loads the word lists, builds the Flask-SocketIO application and serves it.
"""

import os
from wordgame import create_app
from wordgame.config import config
from wordgame.utils.game_logger import game_logger


def main():
    """Main function to build the application and start the server."""
    config_class = config[os.getenv('FLASK_ENV', 'default')]
    try:
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_service = app.extensions['game_service']
        print(f"✓ Word lists loaded: {len(game_service.word_source.secret_words)} secret words, "
              f"{len(game_service.word_source.legal_words)} legal words")

        game_logger.logger.info("Word Game Server Starting")

        print(f"\nStarting Word Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Game Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
