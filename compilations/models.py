"""Django ORM models (persistence layer).

Membership rows hold a bare event id with no foreign key: compilations own
their edges and events carry no reference back.
"""

from django.db import models

from compilations.domain.value_objects import TITLE_MAX_LENGTH


class Compilation(models.Model):
    """Persistence model for compilations."""

    title = models.CharField(max_length=TITLE_MAX_LENGTH)
    pinned = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["pinned", "id"], name="compilation_pinned_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class CompilationEvent(models.Model):
    """One (compilation, event) membership edge."""

    compilation = models.ForeignKey(
        Compilation, on_delete=models.CASCADE, related_name="memberships"
    )
    event_id = models.PositiveBigIntegerField()

    class Meta:
        ordering = ["event_id"]
        constraints = [
            models.UniqueConstraint(
                fields=["compilation", "event_id"], name="unique_compilation_event"
            ),
        ]
        indexes = [
            models.Index(fields=["event_id"], name="membership_event_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.compilation_id} -> {self.event_id}"
