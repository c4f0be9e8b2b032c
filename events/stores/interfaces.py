"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from events.domain import EventId, EventShort


class EventLookupProvider(ABC):
    """Read-only access to event projections for other modules."""

    @abstractmethod
    def resolve_many(self, event_ids: Iterable[EventId]) -> dict[EventId, EventShort]:
        """Return short projections keyed by id.

        Identifiers absent from the result do not exist.
        """
        ...

    @abstractmethod
    def exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...
