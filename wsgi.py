"""
WSGI entry point for production deployment.

Use this file with a WSGI server like gunicorn or waitress:

    # Linux/Mac with gunicorn
    gunicorn wsgi:app --bind 0.0.0.0:5000 --workers 4

    # Windows with waitress
    waitress-serve --host=0.0.0.0 --port=5000 wsgi:app

    # Or use the CLI
    python wsgi.py

Importing this module builds the comparison service, so invalid
PRICE_MIN / PRICE_MAX settings stop the server process before it binds.
"""
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from waitress import serve

from pricecomp.api import create_app
from pricecomp.config import Config
from pricecomp.logger import get_logger

logger = get_logger(__name__)

# Create the Flask application instance
app = create_app()


def main():
    """Run with a production-ready server."""
    host = Config.FLASK_HOST
    port = Config.FLASK_PORT
    debug = Config.FLASK_DEBUG

    # Log configuration
    errors = Config.validate()
    if errors:
        logger.warning("Configuration warnings:")
        for error in errors:
            logger.warning(f"  - {error}")

    logger.info(f"Starting pricecomp on {host}:{port}")
    logger.info(f"Environment: {Config.FLASK_ENV}")
    logger.info(f"Search provider: {Config.SERPER_API_URL} (timeout {Config.REQUEST_TIMEOUT_S}s)")
    logger.info(f"Debug: {debug}")

    # Use waitress for production (cross-platform)
    if Config.FLASK_ENV == "production" or not debug:
        logger.info(f"Using Waitress production server with {Config.WAITRESS_THREADS} threads")
        serve(app, host=host, port=port, threads=Config.WAITRESS_THREADS)
    else:
        # Development mode - use Flask's built-in server
        logger.info("Using Flask development server")
        app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
