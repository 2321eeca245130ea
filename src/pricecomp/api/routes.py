"""
API routes for the price comparison application.
"""
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from ..logger import get_logger
from ..search.serper_client import SearchError
from ..services.price_comparison import PriceComparisonService, results_to_dicts

logger = get_logger(__name__)

# Create blueprint
api_bp = Blueprint('api', __name__, url_prefix='/api/v1/compare')


def get_service() -> PriceComparisonService:
    """Return the service registered by create_app."""
    return current_app.extensions['price_comparison']


@api_bp.route('/search', methods=['POST'])
def search_prices() -> tuple[Dict[str, Any], int]:
    """
    Find the cheapest offers for a product.

    Expected JSON:
    {
        "productName": "iphone 15"
    }

    Returns:
    {
        "status": "success",
        "query": "iphone 15",
        "count": 2,
        "results": [{"url": ..., "title": ..., "price": "799.99", "store": ...}]
    }
    """
    data = request.get_json(silent=True) or {}
    product_name = data.get('productName') if isinstance(data, dict) else None

    if not isinstance(product_name, str) or not product_name.strip():
        return jsonify({
            'status': 'error',
            'message': 'productName is required'
        }), 400

    product_name = product_name.strip()
    logger.info(f"search end point called for this item {product_name}")

    try:
        results = get_service().execute(product_name)
    except SearchError as e:
        logger.error(f"Search provider failed for '{product_name}': {e.message}")
        return jsonify({
            'status': 'error',
            'message': 'Failed to fetch search results'
        }), 502
    except Exception as e:
        logger.error(f"Error in search endpoint: {e}", exc_info=True)
        return jsonify({
            'status': 'error',
            'message': str(e)
        }), 500

    return jsonify({
        'status': 'success',
        'query': product_name,
        'count': len(results),
        'results': results_to_dicts(results)
    }), 200
