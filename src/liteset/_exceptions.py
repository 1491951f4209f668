__all__ = ["UnannotatableMemberError"]

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class UnannotatableMemberError(Exception):
    item: Any

    def __str__(self):
        return (
            f"Expected a lite set member to be an object with an instance __dict__, "
            f"but got {self.item!r} of type {type(self.item).__name__}"
        )
