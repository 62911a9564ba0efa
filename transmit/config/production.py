"""
Production environment specific settings.

Structured logs are switched on so records can be shipped to an aggregator.
"""

from .base import BaseAppSettings


class ProductionSettings(BaseAppSettings):
    """
    Settings class for production environment.

    Attributes:
        DEBUG: Always False in production
        LOG_JSON_FORMAT: JSON log lines
    """

    DEBUG: bool = False
    LOG_JSON_FORMAT: bool = True
