"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It validates the word database, initializes the game service and starts
the Flask-SocketIO application.
"""

from wordle_game import create_app
from wordle_game.config import Config, validate_word_list_integrity
from wordle_game.services.game_service import initialize_game_service
from wordle_game.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        print("✓ Word lists validated")

        game_service = initialize_game_service()
        print(f"✓ Game service initialized with {len(game_service.word_list)} answer words")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Server-driven animations: {Config.AUTO_ADVANCE_ANIMATIONS}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
