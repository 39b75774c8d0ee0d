from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, TextIO

from ..data.storage import RosterStorage
from ..services.roster import RosterService
from .prompts import read_float, read_int, read_line


log = logging.getLogger(__name__)

BANNER = "==== School Management System ===="
MENU_LINES = [
    "1. Add Student",
    "2. Add Teacher",
    "3. View All",
    "4. Remove by ID",
    "5. Exit",
    "6. Search by name",
    "7. Search by ID",
    "8. Show students above a grade",
    "9. Back to main menu (Exit)",
]

SAVE_AND_EXIT = 5
LEAVE = 9


class Session:
    """Interactive menu loop over one RosterService."""

    def __init__(
        self,
        service: RosterService,
        storage: RosterStorage,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self.service = service
        self.storage = storage
        self.stdin = stdin
        self.stdout = stdout
        self.actions: Dict[int, Callable[[], None]] = {
            1: self.add_student,
            2: self.add_teacher,
            3: self.list_all,
            4: self.remove_by_id,
            6: self.search_by_name,
            7: self.search_by_id,
            8: self.students_above_grade,
        }

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout or sys.stdout)

    def _int(self, prompt: str) -> int:
        return read_int(prompt, self.stdin, self.stdout)

    def _float(self, prompt: str) -> float:
        return read_float(prompt, self.stdin, self.stdout)

    def _line(self, prompt: str) -> str:
        return read_line(prompt, self.stdin, self.stdout)

    def load(self) -> None:
        result = self.storage.load()
        if result.missing:
            return
        if not result.ok:
            self.say(f"Warning: error loading data: {result.error}")
            self.service.replace([])
            return
        self.service.replace(result.people)
        self.say("Data loaded successfully!")

    def save(self) -> bool:
        result = self.storage.save(self.service.people)
        if result.ok:
            self.say("Data saved successfully!")
        else:
            self.say(f"Warning: error saving data: {result.error}")
        return result.ok

    def run(self) -> bool:
        """Load, loop until exit, and report whether the roster was saved."""
        log.info("Starting roster session")
        self.load()
        try:
            while True:
                self.say()
                self.say(BANNER)
                for line in MENU_LINES:
                    self.say(line)
                choice = self._int("Choose: ")
                if choice == SAVE_AND_EXIT:
                    saved = self.save()
                    log.info("Exiting session saved=%s", saved)
                    return saved
                if choice == LEAVE:
                    log.info("Back to main menu, leaving without saving")
                    return False
                action = self.actions.get(choice)
                if action is None:
                    self.say("Invalid choice.")
                    continue
                action()
        except EOFError:
            log.warning("Input closed, ending session without saving")
            return False

    def add_student(self) -> None:
        name = self._line("Enter name: ")
        pid = self._int("Enter ID: ")
        grade = self._float("Enter grade: ")
        self.service.add_student(pid, name, grade)
        self.say("Student added.")

    def add_teacher(self) -> None:
        name = self._line("Enter name: ")
        pid = self._int("Enter ID: ")
        subject = self._line("Enter subject: ")
        self.service.add_teacher(pid, name, subject)
        self.say("Teacher added.")

    def list_all(self) -> None:
        people = self.service.list_all()
        if not people:
            self.say("No records.")
            return
        for p in people:
            self.say(p.describe())

    def remove_by_id(self) -> None:
        pid = self._int("Enter ID to remove: ")
        removed = self.service.remove_by_id(pid)
        if removed == 0:
            self.say("ID not found.")
        elif removed == 1:
            self.say("Removed.")
        else:
            self.say(f"Removed {removed} records.")

    def search_by_name(self) -> None:
        query = self._line("Enter name (or part): ")
        matches = self.service.search_by_name(query)
        if not matches:
            self.say(f"No matches for: {query}")
            return
        for p in matches:
            self.say(p.describe())

    def search_by_id(self) -> None:
        pid = self._int("Enter ID to search: ")
        found = self.service.search_by_id(pid)
        if found is None:
            self.say(f"No person with ID {pid}")
        else:
            self.say(found.describe())

    def students_above_grade(self) -> None:
        limit = self._float("Enter minimum grade: ")
        self.say(f"Students with grade >= {limit}:")
        for s in self.service.students_above_grade(limit):
            self.say(s.describe())
