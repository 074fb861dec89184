"""
Wordlet Game Server - Main Entry Point

This is the main entry point for the Wordlet game server.
It initializes the game service and starts the Flask application.
"""

import os

from . import create_app
from .config import config
from .services.dictionary_service import Dictionary, get_dictionary
from .services.game_service import initialize_game_service
from .utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config.get(os.getenv('WORDLET_CONFIG', 'default'), config['default'])

    try:
        print("Initializing services...")

        if config_class.WORD_LIST_PATH:
            dictionary = Dictionary.from_file(config_class.WORD_LIST_PATH)
        else:
            dictionary = get_dictionary()
        print(f"✓ Dictionary loaded ({len(dictionary)} words)")

        initialize_game_service(dictionary)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordlet Server Starting")

        print(f"\nStarting Wordlet Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Default difficulty: {config_class.DEFAULT_DIFFICULTY}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordlet Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
