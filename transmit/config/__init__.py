"""
Configuration module for Transmit.

This module provides:
- BaseAppSettings: The base class for application settings, supporting environment variable loading.
- Environment-specific settings (development, testing, production).
- get_settings: Factory for loading the correct settings class based on APP_ENV.

Example environment variables (to be placed in your consuming project's .env or environment):

APP_NAME=Transmit
APP_ENV=development
DEBUG=True
LOG_LEVEL=INFO
LOG_JSON_FORMAT=False
DEFAULT_PER_PAGE=10
INCLUDE_KEY=include
PAGE_KEY=page
INCLUDE_RECURSION_LIMIT=10
"""

from .base import BaseAppSettings
from .development import DevelopmentSettings
from .production import ProductionSettings
from .settings import get_settings
from .testing import TestingSettings

__all__ = [
    "BaseAppSettings",
    "get_settings",
    "DevelopmentSettings",
    "ProductionSettings",
    "TestingSettings",
]
