"""Business logic used by HTTP controllers.

`StudentService` checks write payloads and coordinates the
`StudentRepository`. It raises the error kinds from `errors` and never
builds HTTP responses itself.
"""

import logging
from typing import Any, Dict, List

from . import repositories
from .errors import MissingRequiredField, NotFound
from .models import Student
from .schemas import REQUIRED_FIELDS, StudentIn

logger = logging.getLogger("student_directory.services")


def is_present(value: Any) -> bool:
    """Presence test for a decoded JSON value.

    Only `null`, `false`, `0` and `""` count as absent. Empty arrays and
    objects count as present, unlike Python's own truthiness.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


class StudentService:
    """CRUD operations for students with presence checks on writes."""
    def __init__(self, repo: repositories.StudentRepository):
        self.repo = repo

    @staticmethod
    def parse_payload(payload: Any) -> Dict[str, Any]:
        """Extract `name`, `age` and `major` from a decoded JSON body.

        Values are passed through exactly as sent; the only check is
        `is_present`, so `""`, `null` and `0` are all rejected. Anything
        other than a JSON object is treated as a body with no fields.
        Raises `MissingRequiredField` listing the absent fields.
        """
        if not isinstance(payload, dict):
            payload = {}
        data = StudentIn.model_validate(
            {k: payload[k] for k in REQUIRED_FIELDS if k in payload}
        ).model_dump()
        missing = [k for k in REQUIRED_FIELDS if not is_present(data[k])]
        if missing:
            raise MissingRequiredField(missing)
        return data

    def list_students(self) -> List[Student]:
        return self.repo.list_all()

    def get_student(self, student_id: int) -> Student:
        """Return the student or raise `NotFound`."""
        student = self.repo.get(student_id)
        if student is None:
            raise NotFound()
        return student

    def ensure_exists(self, student_id: int) -> None:
        self.get_student(student_id)

    def create_student(self, payload: Any) -> Student:
        """Check `payload` and append a new record with the next id."""
        data = self.parse_payload(payload)
        student = self.repo.create(**data)
        logger.info("student_created id=%s", student.id)
        return student

    def update_student(self, student_id: int, payload: Any) -> Student:
        """Replace every field except `id` of an existing record.

        Existence is checked before the payload so an unknown id always
        yields `NotFound`, whatever the payload.
        """
        self.ensure_exists(student_id)
        data = self.parse_payload(payload)
        student = self.repo.replace(student_id, **data)
        if student is None:
            raise NotFound()
        logger.info("student_updated id=%s", student_id)
        return student

    def delete_student(self, student_id: int) -> None:
        if not self.repo.delete(student_id):
            raise NotFound()
        logger.info("student_deleted id=%s", student_id)
