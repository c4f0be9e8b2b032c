from events.domain.models import CategoryRef, EventShort
from events.domain.value_objects import CategoryId, EventId

__all__ = [
    "CategoryRef",
    "EventShort",
    "CategoryId",
    "EventId",
]
