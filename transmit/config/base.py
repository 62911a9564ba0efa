"""
Base configuration module for Transmit.

This module provides the base settings class that other settings classes inherit from.
It covers the application identity, logging and the request parameter names the
controller reads.
"""

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings


class BaseAppSettings(BaseSettings):
    """
    Base settings class for application configuration.

    Attributes:
        APP_NAME: The name of the application
        DEBUG: Flag to enable/disable debug mode
        VERSION: Application version string
        LOG_LEVEL: Logging level name
        LOG_JSON_FORMAT: Emit logs as JSON lines
        DEFAULT_PER_PAGE: Page size used when a paginated response gives none
        INCLUDE_KEY: Header / query parameter carrying the include directive
        PAGE_KEY: Query parameter carrying the current page number
        INCLUDE_RECURSION_LIMIT: Maximum nesting depth of requested includes
    """

    APP_NAME: str = Field(default="Transmit")
    DEBUG: bool = Field(default=False)
    VERSION: str = Field(default="0.1.0")

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level name")
    LOG_JSON_FORMAT: bool = Field(
        default=False, description="Emit log records as JSON lines"
    )

    # Response configuration
    DEFAULT_PER_PAGE: int = Field(
        default=10, ge=1, description="Default page size for paginated responses"
    )
    INCLUDE_KEY: str = Field(
        default="include",
        description="Header or query parameter naming relations to embed",
    )
    PAGE_KEY: str = Field(
        default="page", description="Query parameter carrying the page number"
    )
    INCLUDE_RECURSION_LIMIT: int = Field(
        default=10, ge=1, description="Maximum nesting depth of includes"
    )

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, value):
        """Accept log level names in any case."""
        if isinstance(value, str):
            value = value.upper()
            if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
                raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator("INCLUDE_KEY", "PAGE_KEY", mode="before")
    def strip_parameter_name(cls, value):
        """Parameter names must not be blank."""
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("Parameter names must not be empty")
        return value

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")
