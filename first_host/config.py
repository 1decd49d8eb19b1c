"""
Configuration management.

Handles loading and validating settings from environment variables. Values
are read on every call so tests and reloads pick up changes immediately.
"""

import logging
import os
from enum import Enum

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://localhost:8001",
]


class AuthMethod(str, Enum):
    """Supported authentication methods."""

    NONE = "none"
    API_KEY = "api_key"


def get_auth_method() -> AuthMethod:
    """
    Get the configured authentication method from environment.

    Returns:
        AuthMethod: The authentication method to use (default: NONE)

    Raises:
        ValueError: If AUTH_METHOD is set to an invalid value
    """
    auth_method_str = os.getenv("AUTH_METHOD", "none").lower()

    try:
        return AuthMethod(auth_method_str)
    except ValueError as e:
        valid_methods = ", ".join([m.value for m in AuthMethod])
        raise ValueError(f"Invalid AUTH_METHOD: '{auth_method_str}'. Valid options: {valid_methods}") from e


def get_api_keys() -> list[str]:
    """
    Get configured API keys from environment.

    Returns:
        List[str]: List of valid API keys (empty list if not using API key auth)

    Raises:
        ValueError: If API_KEYS is required but not set or empty
    """
    auth_method = get_auth_method()

    if auth_method != AuthMethod.API_KEY:
        return []

    api_keys_str = os.getenv("API_KEYS", "").strip()

    if not api_keys_str:
        raise ValueError("API_KEYS environment variable required when AUTH_METHOD=api_key")

    keys = [key.strip() for key in api_keys_str.split(",")]
    keys = [key for key in keys if key]

    if not keys:
        raise ValueError("API_KEYS cannot be empty when AUTH_METHOD=api_key")

    return keys


def get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins from environment.

    Returns:
        List[str]: Origins from CORS_ORIGINS, or localhost development origins
    """
    origins_str = os.getenv("CORS_ORIGINS", "").strip()
    origins = [origin.strip() for origin in origins_str.split(",") if origin.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)


def get_log_level() -> str:
    """
    Get the log level name.

    Returns:
        str: Log level (default: INFO)

    Raises:
        ValueError: If LOG_LEVEL is not a standard level name
    """
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if level not in valid_levels:
        raise ValueError(f"Invalid LOG_LEVEL: '{level}'. Valid options: {', '.join(valid_levels)}")

    return level


def validate_configuration():
    """
    Validate configuration at startup.

    Raises:
        ValueError: If configuration is invalid
    """
    get_log_level()

    if get_auth_method() == AuthMethod.API_KEY:
        # Raises if API_KEYS is missing or empty
        get_api_keys()

    logging.getLogger(__name__).debug("Configuration validated")
