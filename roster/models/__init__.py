# Re-export common types
from .person import Person, person_from_dict, person_to_dict
from .student import Student
from .teacher import Teacher

__all__ = [
    "Person",
    "Student",
    "Teacher",
    "person_from_dict",
    "person_to_dict",
]
