"""Django ORM implementation of the EventLookupProvider."""

from collections.abc import Iterable

from events import models
from events.domain import CategoryId, CategoryRef, EventId, EventShort
from events.stores.interfaces import EventLookupProvider


def _to_domain(row: models.Event) -> EventShort:
    return EventShort(
        id=EventId(row.pk),
        title=row.title,
        annotation=row.annotation,
        category=CategoryRef(id=CategoryId(row.category.pk), name=row.category.name),
        paid=row.paid,
        event_date=row.event_date,
        confirmed_requests=row.confirmed_requests,
    )


class DjangoEventLookupProvider(EventLookupProvider):
    """Database-backed event lookup using Django ORM."""

    def resolve_many(self, event_ids: Iterable[EventId]) -> dict[EventId, EventShort]:
        raw_ids = {event_id.value for event_id in event_ids}
        if not raw_ids:
            return {}
        rows = models.Event.objects.select_related("category").filter(pk__in=raw_ids)
        return {EventId(row.pk): _to_domain(row) for row in rows}

    def exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()
