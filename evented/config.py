import enum
import logging


class Config:
    """Base configuration."""

    LOG_LEVEL = logging.INFO
    LOG_DIR = None  # platform default, see evented.lib.logger.get_log_directory
    MAX_LOG_FILES = 5
    TESTING = False


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = logging.DEBUG


class ProductionConfig(Config):
    """Production configuration."""

    LOG_LEVEL = logging.WARNING


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    LOG_LEVEL = logging.DEBUG


class ConfigType(enum.Enum):
    DEVELOPMENT = DevelopmentConfig
    PRODUCTION = ProductionConfig
    TESTING = TestingConfig

    @classmethod
    def from_name(cls, name: str) -> "ConfigType":
        """Look up a config type by case-insensitive name, e.g. ``"testing"``."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown config: {name}") from None
