from __future__ import annotations

import logging
from typing import Iterable, List

from ..models import Person, Student, Teacher


log = logging.getLogger(__name__)


class RosterService:
    """Owns the in-memory roster. Ids are not assumed to be unique."""

    def __init__(self, people: Iterable[Person] | None = None):
        self.people: List[Person] = list(people or [])

    def replace(self, people: Iterable[Person]) -> None:
        self.people[:] = list(people)

    def add_student(self, id: int, name: str, grade: float) -> Student:
        s = Student(id=id, name=name, grade=grade)
        self.people.append(s)
        log.info("added student id=%s name=%s grade=%s", id, name, grade)
        return s

    def add_teacher(self, id: int, name: str, subject: str) -> Teacher:
        t = Teacher(id=id, name=name, subject=subject)
        self.people.append(t)
        log.info("added teacher id=%s name=%s subject=%s", id, name, subject)
        return t

    def list_all(self) -> List[Person]:
        log.info("listed all records count=%d", len(self.people))
        return list(self.people)

    def remove_by_id(self, id: int) -> int:
        # Every record with the id goes, not just the first
        kept = [p for p in self.people if p.id != id]
        removed = len(self.people) - len(kept)
        self.people[:] = kept
        log.info("removed by id id=%s removed=%d", id, removed)
        return removed

    def search_by_name(self, query: str) -> List[Person]:
        needle = query.lower()
        out = [p for p in self.people if needle in p.name.lower()]
        log.info("searched by name query=%r matches=%d", query, len(out))
        return out

    def search_by_id(self, id: int) -> Person | None:
        found = next((p for p in self.people if p.id == id), None)
        log.info("searched by id id=%s found=%s", id, found is not None)
        return found

    def students_above_grade(self, limit: float) -> List[Student]:
        students = [p for p in self.people if isinstance(p, Student) and p.grade >= limit]
        # sorted() is stable with reverse=True, so equal grades keep insertion order
        out = sorted(students, key=lambda s: s.grade, reverse=True)
        log.info("listed students above grade limit=%s matches=%d", limit, len(out))
        return out
