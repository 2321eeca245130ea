"""
HTTP API for pricecomp.
"""
from .app import create_app

__all__ = ["create_app"]
