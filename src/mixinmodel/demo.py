"""
Walkthrough of the entity hierarchy.

Builds two students and logs what each operation returns.
"""

import logging
from typing import Optional, Tuple

from .app import ApplicationConfig, configure_logging
from .core import Student

logger = logging.getLogger(__name__)


def main(config: Optional[ApplicationConfig] = None) -> Tuple[Student, Student]:
    configure_logging(config or ApplicationConfig.from_env())

    tim = Student("Tim")
    john = Student("John", "BSN25837656")

    tim.save()
    john.delete()
    Student.find("name", "Tim")
    Student.create("Jane")
    tim.doe_dingen()

    logger.info(f"Tim has id {tim.id}, John has id {john.id}")
    logger.info(f"Renamed: {tim.set_name('Timothy').get_name()}")
    tim.set_name("Tim")

    logger.info(f"Students via instance: {tim.number_of_students()}")
    logger.info(f"Students via class: {Student.total_students()}")
    logger.info(f"All names: {list(Student.student_names())}")
    logger.info(f"Names with bsn: {list(Student.student_names(False))}")

    return tim, john


if __name__ == "__main__":
    main()
