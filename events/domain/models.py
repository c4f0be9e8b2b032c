"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import CategoryId, EventId


@dataclass(frozen=True)
class CategoryRef:
    """Category as embedded in event projections."""

    id: CategoryId
    name: str


@dataclass(frozen=True)
class EventShort:
    """Short-form projection of an Event used in list and aggregate views."""

    id: EventId
    title: str
    annotation: str
    category: CategoryRef
    paid: bool
    event_date: datetime
    confirmed_requests: int = 0
