"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True, order=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("EventId must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))


@dataclass(frozen=True)
class CategoryId:
    """Unique identifier for a Category."""

    value: int
