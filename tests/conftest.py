"""Pytest configuration and shared fixtures."""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from compilations.services import CompilationService
from compilations.stores import DjangoCompilationStore
from events.models import Category, Event
from events.stores import DjangoEventLookupProvider
from tests.fakes import InMemoryCompilationStore, InMemoryEventLookup


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def event_lookup() -> InMemoryEventLookup:
    lookup = InMemoryEventLookup()
    lookup.add(1, 2, 3, 4, 5)
    return lookup


@pytest.fixture
def memory_store(event_lookup: InMemoryEventLookup) -> InMemoryCompilationStore:
    return InMemoryCompilationStore(event_lookup)


@pytest.fixture
def service(
    memory_store: InMemoryCompilationStore, event_lookup: InMemoryEventLookup
) -> CompilationService:
    return CompilationService(store=memory_store, events=event_lookup)


@pytest.fixture
def category(db) -> Category:
    return Category.objects.create(name="concerts")


@pytest.fixture
def create_event(category: Category):
    """Factory for persisted events."""

    def _make(title: str = "event", paid: bool = False) -> Event:
        return Event.objects.create(
            title=title,
            annotation=f"{title} annotation",
            description=f"{title} description",
            category=category,
            paid=paid,
            event_date=timezone.now() + timedelta(days=7),
        )

    return _make


@pytest.fixture
def db_events(create_event) -> list[Event]:
    return [create_event(title=f"event {n}", paid=n % 2 == 0) for n in range(1, 6)]


@pytest.fixture
def db_lookup() -> DjangoEventLookupProvider:
    return DjangoEventLookupProvider()


@pytest.fixture
def db_store(db_lookup: DjangoEventLookupProvider) -> DjangoCompilationStore:
    return DjangoCompilationStore(db_lookup)


@pytest.fixture
def db_service(
    db_store: DjangoCompilationStore, db_lookup: DjangoEventLookupProvider
) -> CompilationService:
    return CompilationService(store=db_store, events=db_lookup)
