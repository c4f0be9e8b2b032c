"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self

TITLE_MAX_LENGTH = 50


class Unset(Enum):
    """Marker for a field the caller did not supply."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET


@dataclass(frozen=True, order=True)
class CompilationId:
    """Unique identifier for a Compilation."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("CompilationId must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))


@dataclass(frozen=True)
class Title:
    """Non-blank compilation title of bounded length."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Title must not be blank")
        if len(self.value) > TITLE_MAX_LENGTH:
            raise ValueError(f"Title must be at most {TITLE_MAX_LENGTH} characters")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PageRequest:
    """Offset/limit window over an ordered result set."""

    offset: int = 0
    limit: int = 10

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("Offset cannot be negative")
        if self.limit <= 0:
            raise ValueError("Limit must be positive")

    @property
    def stop(self) -> int:
        return self.offset + self.limit
