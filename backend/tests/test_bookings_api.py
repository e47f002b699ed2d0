"""
API tests for bookings and luggage.
"""


def booking_body(**overrides) -> dict:
    body = {"bookingNumber": 1001, "flightNumber": "LX318", "passengerId": "alice"}
    body.update(overrides)
    return body


class TestBookings:

    def test_create_and_cancel_publish_booking_events(self, client, alice, publisher):
        created = client.post("/api/bookings", json=booking_body(), headers=alice).json()
        client.delete(f"/api/bookings/{created['id']}", headers=alice)

        assert publisher.topics() == ["booking_set", "booking_cancelled"]
        assert publisher.events[0][1]["passengerId"] == "alice"

    def test_update_publishes_nothing(self, client, alice, publisher):
        created = client.post("/api/bookings", json=booking_body(), headers=alice).json()
        publisher.events.clear()

        response = client.put(
            "/api/bookings", json=booking_body(id=created["id"], flightNumber="LX2812"), headers=alice,
        )

        assert response.status_code == 200
        assert publisher.events == []

    def test_bookings_are_private(self, client, alice, bob):
        created = client.post("/api/bookings", json=booking_body(), headers=alice).json()

        assert client.get("/api/bookings", headers=bob).json() == []
        assert client.get(f"/api/bookings/{created['id']}", headers=bob).status_code == 404


class TestLuggage:

    def test_owner_sees_own_luggage(self, client, headers_for):
        carol = headers_for("carol")
        created = client.post(
            "/api/luggages",
            json={"luggageType": "CHECKED", "bookingNumber": 1001, "passengerId": "carol", "weightCategory": 2},
            headers=carol,
        )

        assert created.status_code == 201
        listed = client.get("/api/luggages", headers=carol).json()
        assert [item["luggageType"] for item in listed] == ["CHECKED"]
        assert client.get("/api/luggages", headers=headers_for("dave")).json() == []

    def test_unknown_luggage_type_is_422(self, client, alice):
        response = client.post(
            "/api/luggages", json={"luggageType": "PIANO", "passengerId": "alice"}, headers=alice,
        )

        assert response.status_code == 422
