"""Configuration package for quire."""

from quire.config.exceptions import ConfigError, ConfigLoadError, ConfigValidationError
from quire.config.settings import CONFIG_FILENAME, QuireConfig, StoreSettings

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "QuireConfig",
    "StoreSettings",
]
