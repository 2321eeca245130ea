"""
Main entry point for the pricecomp web application.

Run this file to start the Flask development server.
"""
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from pricecomp.api import create_app
from pricecomp.config import Config
from pricecomp.logger import get_logger

logger = get_logger(__name__)


def main():
    """Main function to run the Flask app."""
    # Validate configuration
    errors = Config.validate()
    if errors:
        logger.error("Configuration errors:")
        for error in errors:
            logger.error(f"  - {error}")

    # Price bounds are needed by every search; refuse to start without them
    try:
        app = create_app()
    except ValueError as e:
        logger.error(f"Cannot start: {e}")
        sys.exit(1)

    if errors:
        logger.warning("App started but searches will fail until SERPER settings are fixed")

    # Run app
    logger.info(f"Starting Flask app on {Config.FLASK_HOST}:{Config.FLASK_PORT}")
    logger.info(f"Accepting prices from {Config.PRICE_MIN} to {Config.PRICE_MAX} AZN")
    logger.info(f"Debug mode: {Config.FLASK_DEBUG}")

    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )


if __name__ == "__main__":
    main()
