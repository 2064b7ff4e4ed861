"""
Student entity.

The enrollment counter and the id generator live at module level and are
not exported: they cannot be reached through ``Student``, its instances or
its subclasses.
"""

import logging
from typing import ClassVar, Iterator, List, Optional

from pydantic import PrivateAttr

from .entity import Person

logger = logging.getLogger(__name__)

_student_count = 0


def _create_student_id() -> int:
    return 5 * (_student_count + 2)


class Student(Person):
    """A person with an identity number, enrolled in the shared registry."""

    id: Optional[int] = None
    runtime_property: Optional[str] = None

    # Every constructed student, in construction order
    students: ClassVar[List['Student']] = []

    _bsn: Optional[str] = PrivateAttr(default=None)

    def __init__(self, name: str, bsn: Optional[str] = None, **data):
        global _student_count
        super().__init__(name, **data)

        self.id = _create_student_id()
        self._bsn = bsn
        self.runtime_property = "set during construction"

        _student_count += 1
        Student.students.append(self)
        self._enroll()

    @property
    def bsn(self) -> Optional[str]:
        """The hidden identifier, or None when the student has none."""
        return self._bsn

    def number_of_students(self) -> int:
        logger.info(f"number_of_students called on instance {self.name!r}")
        return _student_count

    @classmethod
    def total_students(cls) -> int:
        logger.info(f"total_students called on class {cls.__name__}")
        return _student_count

    @classmethod
    def student_names(cls, without_bsn: bool = True) -> Iterator[str]:
        """
        Yield the names of registered students in enrollment order.

        Args:
            without_bsn: When true (the default) students without a bsn are
                included as well; when false they are skipped.
        """
        for student in list(Student.students):
            if without_bsn or student.bsn is not None:
                yield student.name

    def _enroll(self) -> None:
        logger.info(f"Student {self.name!r} enrolled with id {self.id}")


__all__ = ["Student"]
