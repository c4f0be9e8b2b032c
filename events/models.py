"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Category(models.Model):
    """Persistence model for event categories."""

    name = models.CharField(max_length=50, unique=True)

    class Meta:
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for events."""

    title = models.CharField(max_length=120)
    annotation = models.CharField(max_length=2000)
    description = models.TextField(blank=True)
    category = models.ForeignKey(
        Category, on_delete=models.PROTECT, related_name="events"
    )
    paid = models.BooleanField(default=False)
    event_date = models.DateTimeField()
    confirmed_requests = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["event_date"], name="event_date_idx"),
        ]

    def __str__(self) -> str:
        return self.title
