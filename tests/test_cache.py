"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache

from compilations.cache import compilation_key
from compilations.models import Compilation, CompilationEvent


def warm(api_client, compilation_id: int) -> None:
    response = api_client.get(f"/compilations/{compilation_id}")
    assert response.status_code == 200
    assert cache.get(compilation_key(compilation_id)) is not None


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_detail_is_cached(self, api_client, db_service):
        view = db_service.create_compilation("cached")

        warm(api_client, view.id.value)

        assert cache.get(compilation_key(view.id.value))["title"] == "cached"

    def test_zero_padded_id_hits_same_cache_entry(self, api_client, db_service):
        view = db_service.create_compilation("before")
        warm(api_client, view.id.value)
        # Queryset update sends no signals, so only a cache hit can return "before".
        Compilation.objects.filter(pk=view.id.value).update(title="after")

        response = api_client.get(f"/compilations/0{view.id.value}")

        assert response.status_code == 200
        assert response.json()["title"] == "before"

    def test_compilation_save_invalidates_detail_cache(
        self, api_client, db_service, django_capture_on_commit_callbacks
    ):
        view = db_service.create_compilation("before")
        warm(api_client, view.id.value)

        row = Compilation.objects.get(pk=view.id.value)
        row.title = "after"
        with django_capture_on_commit_callbacks(execute=True):
            row.save()

        assert cache.get(compilation_key(view.id.value)) is None
        assert api_client.get(f"/compilations/{view.id.value}").json()["title"] == "after"

    def test_invalidation_waits_for_commit(
        self, api_client, db_service, django_capture_on_commit_callbacks
    ):
        view = db_service.create_compilation("before")
        warm(api_client, view.id.value)

        row = Compilation.objects.get(pk=view.id.value)
        row.title = "after"
        with django_capture_on_commit_callbacks(execute=False) as callbacks:
            row.save()
            assert cache.get(compilation_key(view.id.value)) is not None

        assert len(callbacks) == 1
        callbacks[0]()
        assert cache.get(compilation_key(view.id.value)) is None

    def test_membership_save_invalidates_detail_cache(
        self, api_client, db_service, db_events, django_capture_on_commit_callbacks
    ):
        view = db_service.create_compilation("members")
        warm(api_client, view.id.value)

        with django_capture_on_commit_callbacks(execute=True):
            CompilationEvent.objects.create(
                compilation_id=view.id.value, event_id=db_events[0].pk
            )

        assert cache.get(compilation_key(view.id.value)) is None

    def test_event_delete_invalidates_containing_compilations(
        self, api_client, db_service, db_events, django_capture_on_commit_callbacks
    ):
        holder = db_service.create_compilation("holder", event_ids=[db_events[4].pk])
        other = db_service.create_compilation("other", event_ids=[db_events[0].pk])
        warm(api_client, holder.id.value)
        warm(api_client, other.id.value)

        with django_capture_on_commit_callbacks(execute=True):
            db_events[4].delete()

        assert cache.get(compilation_key(holder.id.value)) is None
        assert cache.get(compilation_key(other.id.value)) is not None
        assert api_client.get(f"/compilations/{holder.id.value}").json()["events"] == []

    def test_category_rename_invalidates_containing_compilations(
        self, api_client, db_service, db_events, category, django_capture_on_commit_callbacks
    ):
        holder = db_service.create_compilation("holder", event_ids=[db_events[0].pk])
        empty = db_service.create_compilation("empty")
        warm(api_client, holder.id.value)
        warm(api_client, empty.id.value)

        category.name = "theatre"
        with django_capture_on_commit_callbacks(execute=True):
            category.save()

        assert cache.get(compilation_key(empty.id.value)) is not None
        events = api_client.get(f"/compilations/{holder.id.value}").json()["events"]
        assert events[0]["category"]["name"] == "theatre"

    def test_patch_invalidates_detail_cache(self, api_client, db_service, db_events):
        view = db_service.create_compilation("patched")
        warm(api_client, view.id.value)

        api_client.patch(
            f"/admin/compilations/{view.id.value}",
            {"events": [db_events[0].pk]},
            format="json",
        )

        events = api_client.get(f"/compilations/{view.id.value}").json()["events"]
        assert [event["id"] for event in events] == [db_events[0].pk]

    def test_delete_invalidates_detail_cache(self, api_client, db_service):
        view = db_service.create_compilation("doomed")
        warm(api_client, view.id.value)

        api_client.delete(f"/admin/compilations/0{view.id.value}")

        assert cache.get(compilation_key(view.id.value)) is None
        assert api_client.get(f"/compilations/{view.id.value}").status_code == 404
