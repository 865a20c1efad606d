"""
Memory Game Server - Main Entry Point

This is the main entry point for the memory game API server.
It builds the Flask application and starts serving requests.
"""

import os
from memory_api import create_app
from memory_api.config import config
from memory_api.utils.api_logger import api_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config.get(os.getenv('APP_ENV', 'default'), config['default'])

    try:
        print("Initializing services...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")

        api_logger.logger.info("Memory Game Server starting")

        print(f"\nStarting Memory Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"High score key policy: {config_class.HIGHSCORE_KEY_POLICY}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        api_logger.logger.info("Memory Game Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        api_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
