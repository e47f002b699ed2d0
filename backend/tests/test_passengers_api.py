"""
API tests for passengers.
"""


PASSENGER = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "email": "ada@example.com",
    "phone": "+41 44 000 00 00",
    "login": "ada",
}


class TestPassengers:

    def test_create_then_get_returns_the_input(self, client):
        created = client.post("/api/passengers", json=PASSENGER)

        assert created.status_code == 201
        fetched = client.get(f"/api/passengers/{created.json()['id']}").json()
        assert fetched.pop("id") == created.json()["id"]
        assert fetched == PASSENGER

    def test_put_with_unknown_id_inserts_under_fresh_id(self, client):
        response = client.put(
            "/api/passengers", json={"id": 3, "firstName": "Alan", "lastName": "Turing"},
        )

        assert response.status_code == 200
        new_id = response.json()["id"]
        assert new_id != 3
        assert client.get(f"/api/passengers/{new_id}").json()["lastName"] == "Turing"
        assert client.get("/api/passengers/3").status_code == 404

    def test_put_to_unknown_id_never_collides_with_later_posts(self, client):
        put_id = client.put(
            "/api/passengers", json={"id": 3, "firstName": "Alan", "lastName": "Turing"},
        ).json()["id"]

        posted = [client.post("/api/passengers", json=PASSENGER) for _ in range(3)]

        assert [r.status_code for r in posted] == [201, 201, 201]
        ids = [put_id] + [r.json()["id"] for r in posted]
        assert len(set(ids)) == 4
        assert len(client.get("/api/passengers").json()) == 4

    def test_missing_passenger_is_404(self, client):
        response = client.get("/api/passengers/12345")

        assert response.status_code == 404
        assert response.json()["entityName"] == "passenger"
        assert response.headers["X-fms-error"] == "error.notfound"

    def test_missing_required_field_is_422(self, client):
        assert client.post("/api/passengers", json={"firstName": "Ada"}).status_code == 422
