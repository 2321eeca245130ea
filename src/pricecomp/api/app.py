"""
Flask application factory for pricecomp.
"""
from typing import Optional

from flask import Flask
from flask_cors import CORS

from .. import __version__
from ..config import Config
from ..logger import get_logger
from ..services.price_comparison import PriceComparisonService
from .routes import api_bp

logger = get_logger(__name__)


def create_app(service: Optional[PriceComparisonService] = None) -> Flask:
    """
    Create and configure Flask application.

    Args:
        service: Pre-built comparison service (tests inject one with a fake
            search client); built from Config when omitted

    Returns:
        Configured Flask app instance

    Raises:
        ValueError: if the price bound settings are invalid
    """
    app = Flask(__name__)

    app.config['SECRET_KEY'] = Config.SECRET_KEY
    app.config['ENV'] = Config.FLASK_ENV

    # Enable CORS with configured origins
    cors_origins = Config.get_cors_origins()
    if cors_origins == ["*"]:
        CORS(app)
    else:
        CORS(app, origins=cors_origins)

    # Build the service up front so bad price settings fail at startup
    if service is None:
        service = PriceComparisonService()
    app.extensions['price_comparison'] = service

    app.register_blueprint(api_bp)

    @app.route('/health')
    def health():
        """Health check endpoint."""
        return {'status': 'healthy', 'version': __version__}

    logger.info("Flask app created")
    logger.info(f"Configuration: {Config.get_summary()}")

    errors = Config.validate()
    if errors:
        logger.warning(f"Configuration warnings: {errors}")

    return app
