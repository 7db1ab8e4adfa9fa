import pytest

from student_directory.errors import MissingRequiredField, NotFound
from student_directory.repositories import SAMPLE_STUDENTS, StudentRepository
from student_directory.services import StudentService, is_present


def _svc():
    return StudentService(StudentRepository(SAMPLE_STUDENTS))


def test_parse_payload_keeps_only_known_fields():
    data = StudentService.parse_payload({'name': 'Luis', 'age': 19, 'major': 'Arte', 'id': 50, 'extra': 1})
    assert data == {'name': 'Luis', 'age': 19, 'major': 'Arte'}


@pytest.mark.parametrize('payload, missing', [
    ({}, ['name', 'age', 'major']),
    ({'name': 'Luis', 'age': 19}, ['major']),
    ({'name': '', 'age': 19, 'major': 'Arte'}, ['name']),
    ({'name': 'Luis', 'age': None, 'major': 'Arte'}, ['age']),
    # falsy age is treated like a missing one
    ({'name': 'Luis', 'age': 0, 'major': 'Arte'}, ['age']),
])
def test_parse_payload_reports_missing_fields(payload, missing):
    with pytest.raises(MissingRequiredField) as info:
        StudentService.parse_payload(payload)
    assert info.value.fields == missing
    assert info.value.http_status == 400


@pytest.mark.parametrize('payload', [[1, 2, 3], 'text', 42, None])
def test_non_object_payload_has_no_fields(payload):
    with pytest.raises(MissingRequiredField):
        StudentService.parse_payload(payload)


def test_create_stores_values_as_sent():
    svc = _svc()
    created = svc.create_student({'name': 5, 'age': '19', 'major': ['Arte', 'Historia']})
    assert created.id == 4
    assert svc.get_student(4).model_dump() == {'id': 4, 'name': 5, 'age': '19', 'major': ['Arte', 'Historia']}


@pytest.mark.parametrize('value, present', [
    (None, False),
    (False, False),
    (0, False),
    (0.0, False),
    ('', False),
    (True, True),
    (19, True),
    (-1, True),
    ('0', True),
    (' ', True),
    ([], True),
    ({}, True),
])
def test_is_present_follows_json_falsiness(value, present):
    assert is_present(value) is present


def test_empty_array_and_object_count_as_present():
    data = StudentService.parse_payload({'name': [], 'age': {}, 'major': 'Arte'})
    assert data == {'name': [], 'age': {}, 'major': 'Arte'}


def test_update_checks_existence_before_payload():
    svc = _svc()
    with pytest.raises(NotFound):
        svc.update_student(99, {})


def test_update_with_missing_field_leaves_record_untouched():
    svc = _svc()
    before = svc.get_student(1)
    with pytest.raises(MissingRequiredField):
        svc.update_student(1, {'name': 'Ana'})
    assert svc.get_student(1) == before


def test_delete_unknown_raises_not_found():
    svc = _svc()
    with pytest.raises(NotFound):
        svc.delete_student(42)
    assert len(svc.list_students()) == 3
