"""
MixinModel - Mixins and Inheritance for Pydantic Entities

A small entity hierarchy showing how behavior mixins, single inheritance
and the different member visibility conventions fit together.
"""

from .core import Person, Student, OrmMixin, ChoresMixin, mixin
from .exceptions import MixinModelError, InvalidArgument
from .app import ApplicationConfig, Environment, LoggingConfig, configure_logging

__all__ = [
    # Entities
    'Person',
    'Student',

    # Mixins
    'OrmMixin',
    'ChoresMixin',
    'mixin',

    # Errors
    'MixinModelError',
    'InvalidArgument',

    # Configuration
    'ApplicationConfig',
    'Environment',
    'LoggingConfig',
    'configure_logging',
]
