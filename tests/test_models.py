import pytest

from roster.models import Student, Teacher, person_from_dict, person_to_dict


def test_student_description_keeps_name_without_separator() -> None:
    s = Student(id=10, name="Alice", grade=95.0)
    assert s.describe() == "Student | ID: 10 | NameAlice | Grade: 95.0"


def test_teacher_description() -> None:
    t = Teacher(id=20, name="Bob", subject="Math")
    assert t.describe() == "Teacher | ID: 20 | Name: Bob | Subject: Math"


def test_no_validation_on_construction() -> None:
    s = Student(id=-3, name="", grade=-12.5)
    assert s.describe() == "Student | ID: -3 | Name | Grade: -12.5"


def test_id_is_fixed_but_name_is_mutable() -> None:
    t = Teacher(id=1, name="Old", subject="Art")
    t.name = "New"
    assert t.name == "New"
    with pytest.raises(AttributeError):
        t.id = 2
    assert t.id == 1


def test_record_dict_keeps_variant() -> None:
    data = person_to_dict(Teacher(id=4, name="Kofi", subject="Science"))
    assert data == {"kind": "teacher", "id": 4, "name": "Kofi", "subject": "Science"}
    assert person_from_dict(data) == Teacher(id=4, name="Kofi", subject="Science")


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        person_from_dict({"kind": "janitor", "id": 1, "name": "X"})


def test_missing_field_is_rejected() -> None:
    with pytest.raises(KeyError):
        person_from_dict({"kind": "student", "id": 1, "name": "X"})
