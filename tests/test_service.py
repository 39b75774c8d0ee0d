from roster.models import Student, Teacher
from roster.services import RosterService


def test_add_and_list_in_insertion_order() -> None:
    svc = RosterService()
    s = svc.add_student(10, "Alice", 95.0)
    t = svc.add_teacher(20, "Bob", "Math")
    assert svc.list_all() == [s, t]


def test_remove_by_id_removes_every_match() -> None:
    svc = RosterService()
    svc.add_student(1, "A", 50.0)
    svc.add_teacher(1, "B", "Art")
    svc.add_student(2, "C", 60.0)
    assert svc.remove_by_id(1) == 2
    assert [p.id for p in svc.list_all()] == [2]
    assert svc.search_by_id(1) is None


def test_remove_unknown_id_reports_zero() -> None:
    svc = RosterService([Student(id=1, name="A", grade=1.0)])
    assert svc.remove_by_id(99) == 0
    assert len(svc.people) == 1


def test_remove_mutates_the_same_list() -> None:
    svc = RosterService()
    people = svc.people
    svc.add_student(5, "E", 1.0)
    svc.remove_by_id(5)
    assert people is svc.people and people == []


def test_search_by_id_returns_first_match() -> None:
    svc = RosterService()
    first = svc.add_teacher(3, "First", "History")
    svc.add_student(3, "Second", 80.0)
    assert svc.search_by_id(3) is first


def test_search_by_name_is_case_insensitive_substring() -> None:
    svc = RosterService()
    anna = svc.add_student(1, "Anna", 70.0)
    svc.add_teacher(2, "Bob", "Math")
    assert svc.search_by_name("an") == [anna]
    assert svc.search_by_name("AN") == [anna]
    assert svc.search_by_name("zed") == []


def test_students_above_grade_is_stable_descending() -> None:
    svc = RosterService()
    svc.add_student(1, "One", 70.0)
    svc.add_student(2, "Two", 90.0)
    svc.add_teacher(9, "Teach", "Math")
    svc.add_student(3, "Three", 90.0)
    svc.add_student(4, "Four", 85.0)
    out = svc.students_above_grade(80.0)
    assert [s.id for s in out] == [2, 3, 4]
    assert all(isinstance(s, Student) for s in out)


def test_students_above_grade_includes_limit_and_never_teachers() -> None:
    svc = RosterService(
        [Teacher(id=1, name="T", subject="Art"), Student(id=2, name="S", grade=80.0)]
    )
    assert [s.id for s in svc.students_above_grade(80.0)] == [2]
    assert svc.students_above_grade(80.5) == []


def test_replace_swaps_collection() -> None:
    svc = RosterService([Student(id=1, name="A", grade=1.0)])
    svc.replace([Teacher(id=2, name="B", subject="Art")])
    assert [p.id for p in svc.people] == [2]
