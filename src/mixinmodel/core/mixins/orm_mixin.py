"""
OrmMixin: persistence-shaped operations with no backing store.

Every operation only reports what it would do on the log. ``find`` and
``create`` hand their arguments back to the caller unchanged.
"""

import logging
from typing import Any, Tuple

logger = logging.getLogger(__name__)


class OrmMixin:
    """
    Stub ORM operations mixin.

    Provides save and delete on instances, find and create on the class.
    """

    def save(self) -> None:
        """Pretend to persist this entity."""
        logger.info(f"Saving {self.__class__.__name__} {self._orm_label()}")

    def delete(self) -> None:
        """Pretend to remove this entity."""
        logger.info(f"Deleting {self.__class__.__name__} {self._orm_label()}")

    @classmethod
    def find(cls, *args: Any) -> Tuple[Any, ...]:
        """Pretend to look up entities; returns the query arguments."""
        logger.info(f"Finding {cls.__name__} with {args!r}")
        return args

    @classmethod
    def create(cls, *args: Any) -> Tuple[Any, ...]:
        """Pretend to create an entity; returns the given arguments."""
        logger.info(f"Creating {cls.__name__} with {args!r}")
        return args

    def _orm_label(self) -> str:
        return repr(getattr(self, 'name', None) or id(self))


__all__ = ["OrmMixin"]
