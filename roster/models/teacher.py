from dataclasses import dataclass
from typing import ClassVar

from .base import FixedId


@dataclass
class Teacher(FixedId):
    id: int
    name: str
    subject: str
    kind: ClassVar[str] = "teacher"

    def describe(self) -> str:
        return f"Teacher | ID: {self.id} | Name: {self.name} | Subject: {self.subject}"
