"""Integration tests for the compilation HTTP endpoints.

Run with: pytest tests/test_compilation_api.py -v
"""

import pytest
from rest_framework.test import APIClient


def create(api_client: APIClient, **body) -> dict:
    response = api_client.post("/admin/compilations", body, format="json")
    assert response.status_code == 201, response.data
    return response.json()


@pytest.mark.django_db
class TestCreateCompilation:
    """Tests for POST /admin/compilations"""

    def test_create_returns_view(self, api_client, db_events):
        event_ids = [event.pk for event in db_events[:3]]

        body = create(api_client, title="Weekend", pinned=True, events=event_ids)

        assert body["title"] == "Weekend"
        assert body["pinned"] is True
        assert [event["id"] for event in body["events"]] == event_ids
        event = body["events"][0]
        assert event["category"]["name"] == "concerts"
        assert set(event) == {
            "id",
            "title",
            "annotation",
            "category",
            "paid",
            "eventDate",
            "confirmedRequests",
        }

    def test_create_defaults(self, api_client):
        body = create(api_client, title="Bare")

        assert body["pinned"] is False
        assert body["events"] == []

    def test_create_blank_title_returns_400(self, api_client):
        response = api_client.post("/admin/compilations", {"title": " "}, format="json")

        assert response.status_code == 400
        assert response.json()["status"] == "BAD_REQUEST"

    def test_create_too_long_title_returns_400(self, api_client):
        response = api_client.post(
            "/admin/compilations", {"title": "x" * 51}, format="json"
        )

        assert response.status_code == 400

    def test_create_unknown_event_returns_409(self, api_client, db_events):
        response = api_client.post(
            "/admin/compilations",
            {"title": "Broken", "events": [db_events[0].pk, 999_999]},
            format="json",
        )

        assert response.status_code == 409
        body = response.json()
        assert body["status"] == "CONFLICT"
        assert body["reason"] == "Integrity constraint has been violated."
        assert "999999" in body["message"]
        assert "timestamp" in body


@pytest.mark.django_db
class TestUpdateCompilation:
    """Tests for PATCH /admin/compilations/{id}"""

    def test_patch_pinned_only(self, api_client, db_events):
        created = create(api_client, title="Keep", events=[db_events[0].pk])

        response = api_client.patch(
            f"/admin/compilations/{created['id']}", {"pinned": True}, format="json"
        )

        assert response.status_code == 200
        body = response.json()
        assert body["pinned"] is True
        assert body["title"] == "Keep"
        assert [event["id"] for event in body["events"]] == [db_events[0].pk]

    def test_patch_events_replaces_set(self, api_client, db_events):
        all_ids = [event.pk for event in db_events]
        created = create(api_client, title="All", events=all_ids)

        response = api_client.patch(
            f"/admin/compilations/{created['id']}",
            {"events": all_ids[2:]},
            format="json",
        )

        assert [event["id"] for event in response.json()["events"]] == all_ids[2:]

    def test_patch_not_found_returns_404(self, api_client):
        response = api_client.patch(
            "/admin/compilations/100", {"title": "new title"}, format="json"
        )

        assert response.status_code == 404
        body = response.json()
        assert body["status"] == "NOT_FOUND"
        assert body["message"] == "Compilation was not found"

    def test_patch_invalid_id_returns_400(self, api_client):
        response = api_client.patch(
            "/admin/compilations/abc", {"title": "new title"}, format="json"
        )

        assert response.status_code == 400


@pytest.mark.django_db
class TestDeleteCompilation:
    """Tests for DELETE /admin/compilations/{id}"""

    def test_delete_then_delete_again(self, api_client):
        created = create(api_client, title="Gone")

        first = api_client.delete(f"/admin/compilations/{created['id']}")
        second = api_client.delete(f"/admin/compilations/{created['id']}")

        assert first.status_code == 204
        assert second.status_code == 404

    def test_delete_missing_returns_404(self, api_client):
        response = api_client.delete("/admin/compilations/100")

        assert response.status_code == 404
        assert response.json()["message"] == "Compilation was not found"


@pytest.mark.django_db
class TestCompilationList:
    """Tests for GET /compilations"""

    def test_list_pinned_only(self, api_client, db_events):
        create(api_client, title="title", pinned=True, events=[db_events[0].pk])
        create(api_client, title="new title", pinned=False)
        create(api_client, title="another title", pinned=True)

        response = api_client.get("/compilations", {"pinned": "true"})

        assert response.status_code == 200
        assert [item["title"] for item in response.json()] == ["title", "another title"]

    def test_list_without_filter_returns_all(self, api_client):
        create(api_client, title="a", pinned=True)
        create(api_client, title="b", pinned=False)

        response = api_client.get("/compilations")

        assert [item["title"] for item in response.json()] == ["a", "b"]

    def test_list_pagination(self, api_client):
        for n in range(4):
            create(api_client, title=f"c{n}")

        response = api_client.get("/compilations", {"from": 1, "size": 2})

        assert [item["title"] for item in response.json()] == ["c1", "c2"]

    def test_list_offset_past_end_is_empty(self, api_client):
        create(api_client, title="only")

        response = api_client.get("/compilations", {"from": 50, "size": 10})

        assert response.status_code == 200
        assert response.json() == []

    def test_list_rejects_bad_size(self, api_client):
        response = api_client.get("/compilations", {"size": 0})

        assert response.status_code == 400
        assert response.json()["status"] == "BAD_REQUEST"


@pytest.mark.django_db
class TestCompilationDetail:
    """Tests for GET /compilations/{id}"""

    def test_get_returns_view(self, api_client, db_events):
        created = create(api_client, title="t", pinned=True, events=[db_events[1].pk])

        response = api_client.get(f"/compilations/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_not_found(self, api_client):
        response = api_client.get("/compilations/100")

        assert response.status_code == 404

    def test_get_invalid_id_format(self, api_client):
        response = api_client.get("/compilations/not-an-id")

        assert response.status_code == 400
