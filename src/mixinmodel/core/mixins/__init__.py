"""
Behavior mixins for entities.

These mixins carry no state of their own and can be combined with any
base model, either by inheritance or through ``core.utils.mixin``.
"""

from .orm_mixin import OrmMixin
from .chores_mixin import ChoresMixin

__all__ = ["OrmMixin", "ChoresMixin"]
