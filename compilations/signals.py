"""Django signals for cache invalidation.

Invalidation runs after the writer's transaction commits, so a read racing
the write cannot cache the pre-commit view again.
"""

from collections.abc import Iterable

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from compilations.cache import invalidate_compilations
from compilations.models import Compilation, CompilationEvent
from events.models import Category, Event


def _invalidate_on_commit(compilation_ids: Iterable[int]) -> None:
    ids = list(compilation_ids)
    if ids:
        transaction.on_commit(lambda: invalidate_compilations(ids))


@receiver([post_save, post_delete], sender=Compilation)
def invalidate_compilation_cache(sender, instance, **kwargs):
    """Invalidate the cached view when a compilation is saved or deleted."""
    _invalidate_on_commit([instance.pk])


@receiver([post_save, post_delete], sender=CompilationEvent)
def invalidate_membership_cache(sender, instance, **kwargs):
    """Invalidate the owning compilation when a membership row changes."""
    _invalidate_on_commit([instance.compilation_id])


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate every compilation that lists the changed event."""
    _invalidate_on_commit(
        CompilationEvent.objects.filter(event_id=instance.pk).values_list(
            "compilation_id", flat=True
        )
    )


@receiver([post_save, post_delete], sender=Category)
def invalidate_category_cache(sender, instance, **kwargs):
    """Invalidate every compilation listing an event of the changed category."""
    event_ids = Event.objects.filter(category_id=instance.pk).values_list("pk", flat=True)
    _invalidate_on_commit(
        CompilationEvent.objects.filter(event_id__in=event_ids).values_list(
            "compilation_id", flat=True
        )
    )
