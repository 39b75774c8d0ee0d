"""
JSON persistence for the roster.

The whole roster is written as one document and read back as one unit.
Failures never propagate: they are logged and handed back as result objects
so the session can warn the operator and carry on.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..models.person import Person, person_from_dict, person_to_dict


log = logging.getLogger(__name__)

FORMAT_VERSION = 1


@dataclass
class SaveResult:
    ok: bool
    error: str | None = None
    category: str | None = None


@dataclass
class LoadResult:
    people: List[Person] = field(default_factory=list)
    ok: bool = True
    missing: bool = False
    error: str | None = None
    category: str | None = None


def dump_roster(people: Sequence[Person]) -> Dict[str, Any]:
    return {"version": FORMAT_VERSION, "people": [person_to_dict(p) for p in people]}


def parse_roster(doc: Any) -> List[Person]:
    if not isinstance(doc, dict) or not isinstance(doc.get("people"), list):
        raise ValueError("roster document must be an object with a 'people' list")
    people: List[Person] = []
    for rec in doc["people"]:
        if not isinstance(rec, dict):
            raise ValueError(f"roster entry must be an object, got {type(rec).__name__}")
        people.append(person_from_dict(rec))
    return people


class RosterStorage:
    def __init__(self, path: Path):
        self.path = Path(path)

    def save(self, people: Sequence[Person]) -> SaveResult:
        # Write beside the target and swap in, so a failed dump keeps the last good file
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(dump_roster(people), f, indent=2)
            tmp.replace(self.path)
        except (OSError, TypeError, ValueError) as e:
            log.error("Failed to save data to %s", self.path, exc_info=e)
            return SaveResult(ok=False, error=str(e), category=type(e).__name__)
        log.info("Data saved successfully to %s records=%d", self.path, len(people))
        return SaveResult(ok=True)

    def load(self) -> LoadResult:
        if not self.path.exists():
            log.info("No saved data found at %s", self.path)
            return LoadResult(missing=True)
        try:
            with self.path.open("r", encoding="utf-8") as f:
                people = parse_roster(json.load(f))
        except (OSError, KeyError, TypeError, ValueError, OverflowError, RecursionError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors; huge numbers
            # overflow float() and deeply nested documents exhaust the decoder stack
            log.error("Failed to load data from %s", self.path, exc_info=e)
            return LoadResult(ok=False, error=str(e), category=type(e).__name__)
        log.info("Data loaded successfully from %s records=%d", self.path, len(people))
        return LoadResult(people=people)
