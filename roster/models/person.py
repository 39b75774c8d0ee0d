from __future__ import annotations

from typing import Any, Dict, Tuple, Type, Union

from .student import Student
from .teacher import Teacher


Person = Union[Student, Teacher]


def person_to_dict(p: Person) -> Dict[str, Any]:
    if isinstance(p, Student):
        return {"kind": p.kind, "id": p.id, "name": p.name, "grade": p.grade}
    if isinstance(p, Teacher):
        return {"kind": p.kind, "id": p.id, "name": p.name, "subject": p.subject}
    raise TypeError(f"not a roster record: {type(p).__name__}")


def _field(data: Dict[str, Any], key: str, types: Type | Tuple[Type, ...]) -> Any:
    # Missing fields surface as KeyError; storage reports them as format errors
    value = data[key]
    # bool is an int subclass but never a valid id or grade
    if isinstance(value, bool) or not isinstance(value, types):
        raise ValueError(f"field {key!r} has invalid value {value!r}")
    return value


def person_from_dict(data: Dict[str, Any]) -> Person:
    kind = data.get("kind")
    if kind == Student.kind:
        return Student(
            id=_field(data, "id", int),
            name=_field(data, "name", str),
            grade=float(_field(data, "grade", (int, float))),
        )
    if kind == Teacher.kind:
        return Teacher(
            id=_field(data, "id", int),
            name=_field(data, "name", str),
            subject=_field(data, "subject", str),
        )
    raise ValueError(f"unknown record kind: {kind!r}")
