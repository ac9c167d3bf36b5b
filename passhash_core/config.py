"""
Password Hasher Configuration
=============================
Defaults read from environment variables.
"""

import os
from dataclasses import dataclass

from .exceptions import ConfigError

# Salt size bounds in bytes
MIN_SALT_SIZE = 8
MAX_SALT_SIZE = 32

DEFAULT_SALT_SIZE = 16
DEFAULT_NORMALIZE = True
DEFAULT_LOG_LEVEL = "INFO"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Process-wide defaults for new hashers."""
    salt_size: int = DEFAULT_SALT_SIZE
    normalize: bool = DEFAULT_NORMALIZE
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean value, got '{value}'")


def validate_salt_size(salt_size: int) -> int:
    """Ensure the salt size is within the supported range."""
    if not MIN_SALT_SIZE <= salt_size <= MAX_SALT_SIZE:
        raise ConfigError(
            f"Salt size must be between {MIN_SALT_SIZE} and {MAX_SALT_SIZE} bytes."
        )
    return salt_size


def load_settings() -> Settings:
    """
    Build settings from the environment.

    Environment:
        PASSHASH_SALT_SIZE: Salt size in bytes (8-32, default 16)
        PASSHASH_NORMALIZE: Apply RFC 8265 normalization (default true)
        PASSHASH_LOG_LEVEL: Logging level for setup_logging (default INFO)

    Raises:
        ConfigError: If a variable holds an invalid value
    """
    raw_salt_size = os.getenv("PASSHASH_SALT_SIZE")
    salt_size = DEFAULT_SALT_SIZE
    if raw_salt_size:
        try:
            salt_size = int(raw_salt_size)
        except ValueError:
            raise ConfigError(
                f"PASSHASH_SALT_SIZE must be an integer, got '{raw_salt_size}'"
            ) from None
        validate_salt_size(salt_size)

    raw_normalize = os.getenv("PASSHASH_NORMALIZE")
    normalize = DEFAULT_NORMALIZE
    if raw_normalize:
        normalize = _parse_bool("PASSHASH_NORMALIZE", raw_normalize)

    log_level = os.getenv("PASSHASH_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    return Settings(salt_size=salt_size, normalize=normalize, log_level=log_level)
