from typing import Optional

from pydantic import BaseModel, ConfigDict

from .mixins import OrmMixin, ChoresMixin


class Person(OrmMixin, ChoresMixin, BaseModel):
    """Base class for all people."""
    model_config = ConfigDict(extra='forbid')

    name: str

    # OrmMixin provides: save, delete, find, create
    # ChoresMixin provides: doe_dingen

    def __init__(self, name: str, **data):
        super().__init__(name=name, **data)

    def set_name(self, value: Optional[str]) -> 'Person':
        """Replace the name unless ``value`` is None. Returns self for chaining."""
        if value is not None:
            self.name = value
        return self

    def get_name(self) -> str:
        return self.name
