"""Configuration loaded from environment variables."""

import os


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


def _get_env_float(key: str, default: str) -> float:
    """Get float environment variable with validation."""
    try:
        return float(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid float value for {key}")


def _get_env_bool(key: str, default: str) -> bool:
    """Get boolean environment variable with validation."""
    value = os.getenv(key, default).strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean value for {key}")


class Config:
    """Centralized configuration from environment variables."""

    # Generation
    PASSWORD_LENGTH: int = _get_env_int("PASSWORD_LENGTH", "12")
    MAX_GENERATION_ATTEMPTS: int = _get_env_int("MAX_GENERATION_ATTEMPTS", "5000")

    # fixed_symbol_class keeps the hardcoded symbol set, caller_symbols counts
    # only the symbols the caller typed
    COMPOSITION_POLICY: str = os.getenv("COMPOSITION_POLICY", "fixed_symbol_class")

    # Breach service
    BREACH_API_URL: str = os.getenv("BREACH_API_URL", "https://api.pwnedpasswords.com").rstrip("/")
    BREACH_REQUEST_TIMEOUT: float = _get_env_float("BREACH_REQUEST_TIMEOUT", "5.0")
    BREACH_USER_AGENT: str = os.getenv("BREACH_USER_AGENT", "pwgen-breach-check/1.0")

    # Padding makes every range response a similar size; padded entries have count 0
    BREACH_ADD_PADDING: bool = _get_env_bool("BREACH_ADD_PADDING", "false")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


config = Config()
