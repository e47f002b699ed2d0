"""
API tests for flights and airports.
"""


def flight_body(**overrides) -> dict:
    body = {
        "flightNumber": "LX318",
        "departureAirport": "ZRH",
        "arrivalAirport": "LHR",
        "departureTime": "2026-11-01T10:00:00Z",
        "arrivalTime": "2026-11-01T11:45:00Z",
        "capacity": 180,
    }
    body.update(overrides)
    return body


class TestFlights:

    def test_flights_are_visible_to_everyone(self, client, alice):
        created = client.post("/api/flights", json=flight_body(), headers=alice).json()

        assert client.get(f"/api/flights/{created['id']}").status_code == 200
        assert len(client.get("/api/flights").json()) == 1

    def test_lifecycle_publishes_one_event_per_transition(self, client, publisher):
        created = client.post("/api/flights", json=flight_body()).json()
        client.put("/api/flights", json=flight_body(id=created["id"], capacity=150))
        client.delete(f"/api/flights/{created['id']}")

        assert publisher.topics() == ["flight_set", "flight_updated", "flight_cancelled"]
        cancelled = publisher.events[-1][1]
        assert cancelled["id"] == created["id"]
        assert cancelled["flightNumber"] == "LX318"
        assert cancelled["eventType"] == "CANCELLED"

    def test_delete_of_missing_flight_is_404_without_event(self, client, publisher):
        response = client.delete("/api/flights/999")

        assert response.status_code == 404
        assert response.json()["errorKey"] == "notfound"
        assert publisher.events == []

    def test_invalid_airport_code_is_422(self, client):
        response = client.post("/api/flights", json=flight_body(departureAirport="ZURICH"))

        assert response.status_code == 422


class TestAirports:

    def test_crud_round(self, client, publisher):
        created = client.post(
            "/api/airports", json={"code": "ZRH", "name": "Zurich Airport", "city": "Zurich"},
        ).json()

        updated = client.put(
            "/api/airports", json={"id": created["id"], "code": "ZRH", "name": "Kloten", "city": "Zurich"},
        ).json()

        assert updated["name"] == "Kloten"
        assert client.delete(f"/api/airports/{created['id']}").status_code == 204
        assert publisher.events == []
