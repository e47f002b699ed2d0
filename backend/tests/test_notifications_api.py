"""
API tests for notifications and their search mirror.
"""


def notification_body(**overrides) -> dict:
    body = {
        "passengerId": "alice",
        "title": "Gate change",
        "message": "LX318 now departs from gate B12",
        "notificationType": "GATE_CHANGE",
    }
    body.update(overrides)
    return body


class TestNotifications:

    def test_create_indexes_document(self, client, search_mirror):
        created = client.post("/api/notifications", json=notification_body()).json()

        assert created["createdAt"] is not None
        document = search_mirror.documents[created["id"]]
        assert document["title"] == "Gate change"
        assert document["passengerId"] == "alice"

    def test_update_reindexes_and_keeps_created_at(self, client, search_mirror):
        created = client.post("/api/notifications", json=notification_body()).json()

        updated = client.put(
            "/api/notifications", json=notification_body(id=created["id"], title="Boarding now"),
        ).json()

        assert updated["title"] == "Boarding now"
        assert updated["createdAt"] is not None
        assert search_mirror.documents[created["id"]]["title"] == "Boarding now"

    def test_delete_removes_document(self, client, search_mirror):
        created = client.post("/api/notifications", json=notification_body()).json()

        assert client.delete(f"/api/notifications/{created['id']}").status_code == 204
        assert search_mirror.deleted == [created["id"]]
        assert created["id"] not in search_mirror.documents

    def test_notifications_publish_no_events(self, client, publisher):
        client.post("/api/notifications", json=notification_body())

        assert publisher.events == []

    def test_search_returns_matching_notifications(self, client):
        client.post("/api/notifications", json=notification_body())
        client.post(
            "/api/notifications",
            json=notification_body(title="Delay", message="Departure at 11:30", notificationType="DELAY"),
        )

        response = client.get("/api/_search/notifications", params={"query": "gate"})

        assert response.status_code == 200
        assert [hit["title"] for hit in response.json()] == ["Gate change"]

    def test_search_requires_query(self, client):
        assert client.get("/api/_search/notifications").status_code == 422
