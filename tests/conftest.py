import logging

import pytest

import mixinmodel.core.student as student_module
from mixinmodel import Student


@pytest.fixture(autouse=True)
def fresh_enrollment(monkeypatch):
    """Start every test with no students enrolled."""
    monkeypatch.setattr(student_module, "_student_count", 0)
    saved = list(Student.students)
    Student.students.clear()
    yield
    Student.students[:] = saved


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("mixinmodel")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
