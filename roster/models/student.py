from dataclasses import dataclass
from typing import ClassVar

from .base import FixedId


@dataclass
class Student(FixedId):
    id: int
    name: str
    grade: float
    kind: ClassVar[str] = "student"

    def describe(self) -> str:
        return f"Student | ID: {self.id} | Name{self.name} | Grade: {self.grade}"
