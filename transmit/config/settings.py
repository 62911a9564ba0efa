"""
Selection of the settings class for the running environment.
"""

import os
from functools import lru_cache
from typing import Dict, Type

from .base import BaseAppSettings
from .development import DevelopmentSettings
from .production import ProductionSettings
from .testing import TestingSettings

ENVIRONMENTS: Dict[str, Type[BaseAppSettings]] = {
    "development": DevelopmentSettings,
    "testing": TestingSettings,
    "production": ProductionSettings,
}


@lru_cache()
def get_settings() -> BaseAppSettings:
    """
    Load settings for the environment named by ``APP_ENV``.

    Settings are read once per process; unknown or missing values select the
    development settings. Call ``get_settings.cache_clear()`` to reload.

    Returns:
        BaseAppSettings: An instance of environment-specific settings
    """
    env = os.getenv("APP_ENV", "development").strip().lower()
    settings_cls = ENVIRONMENTS.get(env, DevelopmentSettings)
    return settings_cls()
