"""
Application Configurator

Configuration dataclasses and logging setup for mixinmodel applications.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

PACKAGE_LOGGER = "mixinmodel"


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ApplicationConfig:
    """Complete application configuration"""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> 'ApplicationConfig':
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.debug = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.debug = False
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_env(cls) -> 'ApplicationConfig':
        """
        Create configuration from environment variables.

        ``MIXINMODEL_ENV`` selects the environment (default: development),
        ``MIXINMODEL_LOG_LEVEL`` overrides the log level.
        """
        env_name = os.getenv("MIXINMODEL_ENV", Environment.DEVELOPMENT.value).lower()
        try:
            environment = Environment(env_name)
        except ValueError:
            raise ValueError(f"Unknown environment: {env_name}") from None

        config = cls.for_environment(environment)
        level = os.getenv("MIXINMODEL_LOG_LEVEL")
        if level:
            config.logging.level = level.upper()
        return config


def configure_logging(config: Optional[ApplicationConfig] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling this more than once only updates the level and format of the
    handler installed by the first call.
    """
    config = config or ApplicationConfig()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.logging.level)

    formatter = logging.Formatter(config.logging.format, config.logging.date_format)
    handler = next(
        (h for h in logger.handlers if getattr(h, "_mixinmodel_handler", False)), None
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler._mixinmodel_handler = True
        logger.addHandler(handler)
    handler.setFormatter(formatter)

    return logger
