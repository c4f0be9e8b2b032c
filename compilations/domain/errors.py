"""Domain error codes for the compilations module."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


def _id_sort_key(value) -> tuple:
    # Numeric ids first in numeric order, anything malformed after them.
    if isinstance(value, int):
        return (0, value, "")
    return (1, 0, str(value))


class ErrorCode(Enum):
    """Domain error codes."""

    COMPILATION_NOT_FOUND = "COMPILATION_NOT_FOUND"
    INVALID_COMPILATION_ID = "INVALID_COMPILATION_ID"
    INVALID_PAGINATION = "INVALID_PAGINATION"
    INVALID_PINNED = "INVALID_PINNED"
    INVALID_TITLE = "INVALID_TITLE"
    UNKNOWN_EVENTS = "UNKNOWN_EVENTS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return self.message


class CompilationNotFoundError(DomainError):
    """Raised when a compilation is not found."""

    def __init__(self, compilation_id: int) -> None:
        super().__init__(
            code=ErrorCode.COMPILATION_NOT_FOUND,
            message="Compilation was not found",
        )
        self.compilation_id = compilation_id


class InvalidCompilationIdError(DomainError):
    """Raised when a compilation ID is malformed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_COMPILATION_ID,
            message="Invalid compilation ID format",
        )


class InvalidPaginationError(DomainError):
    """Raised when offset or limit is out of range."""

    def __init__(self, detail: str) -> None:
        super().__init__(code=ErrorCode.INVALID_PAGINATION, message=detail)


class ConstraintViolationError(DomainError):
    """Raised when a write would break a compilation invariant."""


class InvalidTitleError(ConstraintViolationError):
    """Raised when a title is blank or too long."""

    def __init__(self, detail: str) -> None:
        super().__init__(code=ErrorCode.INVALID_TITLE, message=detail)


class InvalidPinnedError(ConstraintViolationError):
    """Raised when pinned is supplied as anything but a boolean."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PINNED,
            message="Pinned must be true or false",
        )


class UnknownEventsError(ConstraintViolationError):
    """Raised when a membership set references events that do not exist."""

    def __init__(self, event_ids: Iterable[int]) -> None:
        ids = sorted(event_ids, key=_id_sort_key)
        super().__init__(
            code=ErrorCode.UNKNOWN_EVENTS,
            message=f"Events were not found: {', '.join(map(str, ids))}",
        )
        self.event_ids = ids
