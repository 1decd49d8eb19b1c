"""
Authentication utilities.

Provides API key validation for the X-API-Key header.
"""

import secrets


def validate_api_key(api_key: str | None, valid_keys: list[str]) -> bool:
    """
    Validate an API key against the list of valid keys.

    Args:
        api_key: The API key to validate (from X-API-Key header)
        valid_keys: List of valid API keys

    Returns:
        bool: True if the API key is valid, False otherwise

    Note:
        - Returns False if api_key is None or empty (after stripping)
        - API keys are case-sensitive
    """
    if not api_key:
        return False

    api_key = api_key.strip()

    if not api_key:
        return False

    return any(secrets.compare_digest(api_key, key) for key in valid_keys)
