"""Record models.

The collection holds `Student` instances. Records are replaced wholesale
on update, never mutated field by field, so the model is frozen.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Student(BaseModel):
    """A single student record.

    Fields:
    - `id`: server-assigned, unique and never reused
    - `name`, `age`, `major`: client-supplied and stored exactly as sent;
      clients send a string, an integer and a string
    """
    model_config = ConfigDict(frozen=True)

    id: int
    name: Any
    age: Any
    major: Any
