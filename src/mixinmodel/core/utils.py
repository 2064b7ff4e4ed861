import logging
from typing import Optional, Type, TypeVar

from fastcore.basics import copy_func

from ..exceptions import InvalidArgument

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _copy_member(member):
    """Return an independent copy of a function, classmethod or staticmethod."""
    if isinstance(member, classmethod):
        return classmethod(copy_func(member.__func__))
    if isinstance(member, staticmethod):
        return staticmethod(copy_func(member.__func__))
    return copy_func(member)


def _is_operation(member) -> bool:
    return isinstance(member, (classmethod, staticmethod)) or callable(member)


def mixin(receiver: Type[T], donor: Optional[type]) -> Type[T]:
    """
    Copy the operations defined on ``donor`` onto ``receiver``.

    Plain functions become instance methods of the receiver, classmethods and
    staticmethods stay type-level. Only members declared on the donor class
    itself are copied, dunders are skipped. Each member is copied once, so
    later changes to the donor do not reach the receiver. When two donors
    define the same name the last call wins.

    Args:
        receiver: Class that acquires the operations
        donor: Class whose operations are copied

    Returns:
        The receiver, so calls can be nested

    Raises:
        InvalidArgument: If ``donor`` is None
    """
    if donor is None:
        raise InvalidArgument("Unknown module", argument="donor")

    for name, member in vars(donor).items():
        if name.startswith('__') and name.endswith('__'):
            continue
        if not _is_operation(member):
            continue
        setattr(receiver, name, _copy_member(member))
        logger.debug(f"Mixed {donor.__name__}.{name} into {receiver.__name__}")

    return receiver
