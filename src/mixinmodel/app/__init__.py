"""
Application layer: configuration and logging setup.
"""

from .configurator import (
    Environment,
    LoggingConfig,
    ApplicationConfig,
    configure_logging,
)

__all__ = [
    'Environment',
    'LoggingConfig',
    'ApplicationConfig',
    'configure_logging',
]
