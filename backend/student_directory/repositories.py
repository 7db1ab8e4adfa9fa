"""In-memory repository holding the student collection.

The repository is the store: one instance per application, kept on
`app.state`, with no module-level state. Records keep insertion order and
ids come from a monotonic counter that is never rewound, so a deleted id
is never handed out again.
"""

from typing import Any, Iterable, List, Optional

from .models import Student


SAMPLE_STUDENTS = (
    Student(id=1, name="Ana García", age=20, major="Ingeniería de Software"),
    Student(id=2, name="Juan Pérez", age=22, major="Diseño Gráfico"),
    Student(id=3, name="María López", age=21, major="Marketing Digital"),
)


class StudentRepository:
    """CRUD operations over an ordered list of `Student` records."""
    def __init__(self, seed: Iterable[Student] = ()):
        self._students: List[Student] = list(seed)
        ids = [s.id for s in self._students]
        if len(ids) != len(set(ids)):
            raise ValueError("seed records must have unique ids")
        # counter starts above every preloaded id
        self._next_id = max(ids, default=0) + 1

    @property
    def next_id(self) -> int:
        """Id the next created record will receive."""
        return self._next_id

    def __len__(self) -> int:
        return len(self._students)

    def list_all(self) -> List[Student]:
        """Return a snapshot of the collection in insertion order."""
        return list(self._students)

    def get(self, student_id: int) -> Optional[Student]:
        """Return the record with `student_id` or `None` if not found."""
        for s in self._students:
            if s.id == student_id:
                return s
        return None

    def create(self, name: Any, age: Any, major: Any) -> Student:
        """Assign the next id, append the record and return it."""
        student = Student(id=self._next_id, name=name, age=age, major=major)
        self._next_id += 1
        self._students.append(student)
        return student

    def replace(self, student_id: int, name: Any, age: Any, major: Any) -> Optional[Student]:
        """Overwrite every field of an existing record, keeping its id and position.

        Returns the new record, or `None` if no record has `student_id`.
        """
        idx = self._index_of(student_id)
        if idx is None:
            return None
        updated = Student(id=student_id, name=name, age=age, major=major)
        self._students[idx] = updated
        return updated

    def delete(self, student_id: int) -> bool:
        """Remove the record with `student_id`. Returns False if absent."""
        idx = self._index_of(student_id)
        if idx is None:
            return False
        del self._students[idx]
        return True

    def _index_of(self, student_id: int) -> Optional[int]:
        for idx, s in enumerate(self._students):
            if s.id == student_id:
                return idx
        return None
