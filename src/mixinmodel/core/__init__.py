"""
MixinModel Core Module

Entities, their behavior mixins and the runtime composition helper.
"""

from .entity import Person
from .student import Student
from .mixins import OrmMixin, ChoresMixin
from .utils import mixin

__all__ = [
    "Person",
    "Student",
    "OrmMixin",
    "ChoresMixin",
    "mixin",
]
