"""
Configuration management for pricecomp.
"""
import os
from decimal import Decimal, InvalidOperation
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def parse_price_setting(name: str, value: str) -> Decimal:
    """
    Parse a price bound setting as an exact Decimal.

    Raises:
        ValueError: if the value is not a finite number
    """
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Invalid {name}: {value!r}. Must be a number") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid {name}: {value!r}. Must be a number")
    return amount


class Config:
    """Application configuration."""

    # API Keys
    SERPER_API_KEY: Optional[str] = os.getenv("SERPER_API_KEY")

    # Search provider
    SERPER_API_URL: str = os.getenv("SERPER_API_URL", "https://google.serper.dev/search")
    SEARCH_COUNTRY: str = os.getenv("SEARCH_COUNTRY", "az")
    SEARCH_LANGUAGE: str = os.getenv("SEARCH_LANGUAGE", "az")
    SEARCH_RESULT_COUNT: int = int(os.getenv("SEARCH_RESULT_COUNT", "50"))
    SEARCH_QUERY_SUFFIX: str = os.getenv("SEARCH_QUERY_SUFFIX", "qiymət satış al")
    REQUEST_TIMEOUT_S: int = int(os.getenv("REQUEST_TIMEOUT_S", "30"))

    # Price extraction (strings so they parse as exact decimals)
    PRICE_MIN: str = os.getenv("PRICE_MIN", "1")
    PRICE_MAX: str = os.getenv("PRICE_MAX", "100000")
    RESULT_LIMIT: int = int(os.getenv("RESULT_LIMIT", "5"))
    EXTRACTION_WORKERS: int = int(os.getenv("EXTRACTION_WORKERS", "1"))

    # Flask settings
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key")
    FLASK_ENV: str = os.getenv("FLASK_ENV", "development")
    FLASK_DEBUG: bool = os.getenv("FLASK_DEBUG", "True").lower() == "true"
    FLASK_HOST: str = os.getenv("FLASK_HOST", "0.0.0.0")
    FLASK_PORT: int = int(os.getenv("FLASK_PORT", "5000"))
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")
    WAITRESS_THREADS: int = int(os.getenv("WAITRESS_THREADS", "4"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not cls.SERPER_API_KEY:
            errors.append("SERPER_API_KEY not set in environment")

        if not cls.SERPER_API_URL.startswith(("http://", "https://")):
            errors.append(f"Invalid SERPER_API_URL: {cls.SERPER_API_URL}")

        min_price = max_price = None
        try:
            min_price = parse_price_setting("PRICE_MIN", cls.PRICE_MIN)
        except ValueError as e:
            errors.append(str(e))
        try:
            max_price = parse_price_setting("PRICE_MAX", cls.PRICE_MAX)
        except ValueError as e:
            errors.append(str(e))
        if min_price is not None and max_price is not None and min_price > max_price:
            errors.append(f"PRICE_MIN ({min_price}) must not be greater than PRICE_MAX ({max_price})")

        if cls.RESULT_LIMIT < 1:
            errors.append(f"Invalid RESULT_LIMIT: {cls.RESULT_LIMIT}. Must be at least 1")

        if cls.EXTRACTION_WORKERS < 1:
            errors.append(f"Invalid EXTRACTION_WORKERS: {cls.EXTRACTION_WORKERS}. Must be at least 1")

        return errors

    @classmethod
    def is_valid(cls) -> bool:
        """Check if configuration is valid."""
        return len(cls.validate()) == 0

    @classmethod
    def get_cors_origins(cls) -> list[str]:
        """Split the comma separated CORS_ORIGINS setting."""
        origins = [o.strip() for o in cls.CORS_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]

    @classmethod
    def get_summary(cls) -> dict:
        """Get configuration summary (safe for logging)."""
        return {
            "flask_env": cls.FLASK_ENV,
            "flask_debug": cls.FLASK_DEBUG,
            "serper_api_configured": cls.SERPER_API_KEY is not None,
            "serper_api_url": cls.SERPER_API_URL,
            "search_country": cls.SEARCH_COUNTRY,
            "price_bounds": [cls.PRICE_MIN, cls.PRICE_MAX],
            "result_limit": cls.RESULT_LIMIT,
            "log_level": cls.LOG_LEVEL,
        }
