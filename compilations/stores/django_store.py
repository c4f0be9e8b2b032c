"""Django ORM implementation of the CompilationStore."""

import logging
from collections.abc import Iterable

from django.db import transaction

from compilations import models
from compilations.domain import UNSET, CompilationId, StoredCompilation, Unset
from compilations.domain.errors import UnknownEventsError
from compilations.stores.interfaces import CompilationStore
from events.domain import EventId
from events.stores import EventLookupProvider

logger = logging.getLogger(__name__)


def _to_domain(row: models.Compilation) -> StoredCompilation:
    return StoredCompilation(
        id=CompilationId(row.pk),
        title=row.title,
        pinned=row.pinned,
        event_ids=frozenset(EventId(m.event_id) for m in row.memberships.all()),
    )


class DjangoCompilationStore(CompilationStore):
    """Relational compilation store using Django ORM.

    Membership writes verify event ids against the lookup provider inside the
    same transaction, so dangling references are never inserted.
    """

    def __init__(self, events: EventLookupProvider) -> None:
        self._events = events

    def atomic(self):
        return transaction.atomic()

    def create(
        self, title: str, pinned: bool, event_ids: frozenset[EventId]
    ) -> CompilationId:
        with transaction.atomic():
            self._check_events(event_ids)
            row = models.Compilation.objects.create(title=title, pinned=pinned)
            self._insert_memberships(row.pk, event_ids)
        return CompilationId(row.pk)

    def get(self, compilation_id: CompilationId) -> StoredCompilation | None:
        row = (
            models.Compilation.objects.prefetch_related("memberships")
            .filter(pk=compilation_id.value)
            .first()
        )
        return None if row is None else _to_domain(row)

    def exists(self, compilation_id: CompilationId) -> bool:
        return models.Compilation.objects.filter(pk=compilation_id.value).exists()

    def replace_membership(
        self, compilation_id: CompilationId, event_ids: frozenset[EventId]
    ) -> bool:
        with transaction.atomic():
            row = self._lock(compilation_id)
            if row is None:
                return False
            self._check_events(event_ids)
            models.CompilationEvent.objects.filter(compilation_id=row.pk).delete()
            self._insert_memberships(row.pk, event_ids)
            row.save(update_fields=["updated_at"])
        logger.debug(
            "Replaced membership of compilation %s with %d events",
            compilation_id.value,
            len(event_ids),
        )
        return True

    def update_fields(
        self,
        compilation_id: CompilationId,
        title: str | Unset = UNSET,
        pinned: bool | Unset = UNSET,
    ) -> bool:
        changes = {}
        if title is not UNSET:
            changes["title"] = title
        if pinned is not UNSET:
            changes["pinned"] = pinned
        with transaction.atomic():
            row = self._lock(compilation_id)
            if row is None:
                return False
            if changes:
                for name, value in changes.items():
                    setattr(row, name, value)
                row.save(update_fields=[*changes, "updated_at"])
        return True

    def delete(self, compilation_id: CompilationId) -> bool:
        with transaction.atomic():
            deleted, _ = models.Compilation.objects.filter(
                pk=compilation_id.value
            ).delete()
        return deleted > 0

    def list(
        self, pinned: bool | None, offset: int, limit: int
    ) -> list[StoredCompilation]:
        rows = models.Compilation.objects.prefetch_related("memberships").order_by("id")
        if pinned is not None:
            rows = rows.filter(pinned=pinned)
        return [_to_domain(row) for row in rows[offset : offset + limit]]

    def _lock(self, compilation_id: CompilationId) -> models.Compilation | None:
        # No-op on SQLite, which serializes writers at the database level.
        return (
            models.Compilation.objects.select_for_update()
            .filter(pk=compilation_id.value)
            .first()
        )

    def _check_events(self, event_ids: Iterable[EventId]) -> None:
        wanted = set(event_ids)
        if not wanted:
            return
        found = self._events.resolve_many(wanted)
        missing = wanted - found.keys()
        if missing:
            raise UnknownEventsError(event_id.value for event_id in missing)

    def _insert_memberships(
        self, compilation_pk: int, event_ids: Iterable[EventId]
    ) -> None:
        models.CompilationEvent.objects.bulk_create(
            models.CompilationEvent(compilation_id=compilation_pk, event_id=event_id.value)
            for event_id in sorted(event_ids)
        )
