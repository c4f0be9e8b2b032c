"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every mutating method is
a single transactional unit; ``atomic()`` lets a caller group several of them.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from compilations.domain import UNSET, CompilationId, StoredCompilation, Unset
from events.domain import EventId


class CompilationStore(ABC):
    """Interface for compilation persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Return a context manager that groups calls into one transaction."""
        ...

    @abstractmethod
    def create(
        self, title: str, pinned: bool, event_ids: frozenset[EventId]
    ) -> CompilationId:
        """Insert a compilation with its membership set.

        Raises:
            UnknownEventsError: If any event id does not resolve.
        """
        ...

    @abstractmethod
    def get(self, compilation_id: CompilationId) -> StoredCompilation | None:
        """Return a compilation by ID, or None if not found."""
        ...

    @abstractmethod
    def exists(self, compilation_id: CompilationId) -> bool:
        """Check if a compilation exists."""
        ...

    @abstractmethod
    def replace_membership(
        self, compilation_id: CompilationId, event_ids: frozenset[EventId]
    ) -> bool:
        """Swap the whole membership set. Returns False if not found.

        Raises:
            UnknownEventsError: If any event id does not resolve.
        """
        ...

    @abstractmethod
    def update_fields(
        self,
        compilation_id: CompilationId,
        title: str | Unset = UNSET,
        pinned: bool | Unset = UNSET,
    ) -> bool:
        """Write the supplied scalar fields only. Returns False if not found."""
        ...

    @abstractmethod
    def delete(self, compilation_id: CompilationId) -> bool:
        """Remove a compilation and its membership. Returns False if not found."""
        ...

    @abstractmethod
    def list(
        self, pinned: bool | None, offset: int, limit: int
    ) -> list[StoredCompilation]:
        """Return compilations ordered by id ascending, optionally by pinned."""
        ...
