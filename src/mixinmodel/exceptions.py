"""
MixinModel Exceptions

Errors raised by the composition utilities.
"""

from typing import Optional


class MixinModelError(Exception):
    """Base class for all mixinmodel errors."""


class InvalidArgument(MixinModelError, ValueError):
    """Raised when a composition helper receives an argument it cannot use."""

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


__all__ = ["MixinModelError", "InvalidArgument"]
