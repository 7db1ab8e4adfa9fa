import pytest

from student_directory.models import Student
from student_directory.repositories import SAMPLE_STUDENTS, StudentRepository


def test_counter_seeded_above_max_seed_id():
    repo = StudentRepository(SAMPLE_STUDENTS)
    assert repo.next_id == 4
    assert len(repo) == 3
    assert StudentRepository().next_id == 1
    # gaps in the seed ids do not matter, only the maximum
    gappy = StudentRepository([Student(id=7, name='A', age=1, major='M')])
    assert gappy.next_id == 8


def test_two_seed_records_start_counter_at_three():
    repo = StudentRepository(SAMPLE_STUDENTS[:2])
    created = repo.create('Luis', 19, 'Arte')
    assert created.id == 3


def test_duplicate_seed_ids_rejected():
    s = Student(id=1, name='A', age=1, major='M')
    with pytest.raises(ValueError):
        StudentRepository([s, s])


def test_create_appends_in_insertion_order():
    repo = StudentRepository()
    a = repo.create('Ana', 20, 'X')
    b = repo.create('Bea', 21, 'Y')
    assert [s.id for s in repo.list_all()] == [a.id, b.id] == [1, 2]


def test_ids_never_reused_after_delete():
    repo = StudentRepository()
    first = repo.create('Ana', 20, 'X')
    second = repo.create('Bea', 21, 'Y')
    assert repo.delete(second.id) is True
    assert repo.delete(first.id) is True
    third = repo.create('Cai', 22, 'Z')
    assert third.id == 3


def test_replace_keeps_id_and_position():
    repo = StudentRepository(SAMPLE_STUDENTS)
    updated = repo.replace(2, 'Juan Carlos', 23, 'Arquitectura')
    assert updated == Student(id=2, name='Juan Carlos', age=23, major='Arquitectura')
    assert [s.id for s in repo.list_all()] == [1, 2, 3]
    assert repo.get(2) == updated


def test_missing_ids():
    repo = StudentRepository(SAMPLE_STUDENTS)
    assert repo.get(99) is None
    assert repo.replace(99, 'X', 1, 'Y') is None
    assert repo.delete(99) is False
    assert len(repo) == 3


def test_list_all_returns_snapshot():
    repo = StudentRepository(SAMPLE_STUDENTS)
    snapshot = repo.list_all()
    snapshot.clear()
    assert len(repo) == 3
