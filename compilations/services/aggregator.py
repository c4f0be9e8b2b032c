"""Read-side composition of stored compilations into views."""

import logging
from collections.abc import Sequence

from compilations.domain import CompilationView, StoredCompilation
from events.domain import EventId
from events.stores import EventLookupProvider

logger = logging.getLogger(__name__)


class CompilationAggregator:
    """Resolves membership sets into event projections.

    All member ids of a batch are resolved with one lookup call. Ids that no
    longer resolve are dropped from the view instead of failing the read.
    """

    def __init__(self, events: EventLookupProvider) -> None:
        self._events = events

    def build(self, stored: StoredCompilation) -> CompilationView:
        return self.build_many([stored])[0]

    def build_many(self, stored: Sequence[StoredCompilation]) -> list[CompilationView]:
        wanted: set[EventId] = set().union(*(item.event_ids for item in stored))
        resolved = self._events.resolve_many(wanted) if wanted else {}

        views = []
        for item in stored:
            stale = item.event_ids - resolved.keys()
            if stale:
                logger.debug(
                    "Compilation %s references missing events %s",
                    item.id.value,
                    sorted(event_id.value for event_id in stale),
                )
            events = tuple(
                resolved[event_id]
                for event_id in sorted(item.event_ids)
                if event_id in resolved
            )
            views.append(
                CompilationView(
                    id=item.id, title=item.title, pinned=item.pinned, events=events
                )
            )
        return views
