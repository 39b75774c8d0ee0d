from __future__ import annotations


class FixedId:
    """Mixin that lets ``id`` be assigned once, at construction."""

    def __setattr__(self, key: str, value: object) -> None:
        if key == "id" and "id" in self.__dict__:
            raise AttributeError("id cannot be reassigned")
        super().__setattr__(key, value)
