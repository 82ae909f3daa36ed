"""API tests using FastAPI's TestClient with dependency overrides."""

import httpx
import pytest
from fastapi.testclient import TestClient

from club_leaderboard.api.dependencies import get_club_data, get_firebase_client, get_now
from club_leaderboard.clients.firebase import FirebaseAPIError, FirebaseClient
from club_leaderboard.config import Settings
from club_leaderboard.main import create_app


class FailingClient:
    async def fetch_club_data(self):
        raise FirebaseAPIError("API request failed: leaderboard", status_code=401)


@pytest.fixture
def app(now, club_data):
    app = create_app()
    app.dependency_overrides[get_now] = lambda: now
    app.dependency_overrides[get_club_data] = lambda: club_data
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


class TestMeta:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root_lists_endpoints(self, client):
        assert "leaderboard" in client.get("/").json()["endpoints"]


class TestLeaderboardRoutes:

    def test_get_leaderboard(self, client):
        response = client.get("/api/leaderboard/2025")

        assert response.status_code == 200
        body = response.json()
        assert body["possible_rides"] == 3
        assert [s["entry"]["id"] for s in body["standings"]] == ["carol", "alice", "bob", "dave"]
        assert body["standings"][2]["entry"]["dates"] == ["4/1/2025"]

    def test_get_possible_rides(self, client):
        response = client.get("/api/leaderboard/2025/possible-rides")

        assert response.status_code == 200
        assert response.json() == {
            "year": 2025,
            "window_start": "2025-01-01",
            "window_end": "2025-06-15",
            "possible_rides": 3,
        }

    def test_year_out_of_range(self, client):
        assert client.get("/api/leaderboard/1999").status_code == 422

    def test_database_error_is_bad_gateway(self, app, client):
        del app.dependency_overrides[get_club_data]
        app.dependency_overrides[get_firebase_client] = lambda: FailingClient()

        response = client.get("/api/leaderboard/2025")

        assert response.status_code == 502
        assert "Database unavailable" in response.json()["detail"]

    def test_compute_from_body(self, client):
        payload = {
            "events": [
                {"id": "sat", "isoDate": "2025-01-04"},
                {"id": "sun", "isoDate": "2025-01-05"},
                {"id": "mon", "isoDate": "2025-01-06"},
            ],
            "attendance": [
                {"eventId": "sat", "isoDate": "2025-01-04", "members": {"m1": {"memberId": "m1"}}},
                {"eventId": "sun", "isoDate": "2025-01-05", "members": {"m1": {"memberId": "m1"}}},
                {"eventId": "mon", "isoDate": "2025-01-06", "members": {"m1": {"memberId": "m1"}}},
            ],
            "entries": [
                {"id": "m1", "name": "Rider One", "group": "A1", "rides": 40, "dates": []},
                {"id": "m2", "name": "Rider Two", "group": "A1", "dates": ["07/01/2025"]},
            ],
        }

        response = client.post("/api/leaderboard/2025/compute", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert body["possible_rides"] == 2
        standings = [(s["entry"]["id"], s["entry"]["rides"], s["rank"]) for s in body["standings"]]
        assert standings == [("m1", 2, 1), ("m2", 1, 2)]

    def test_compute_rejects_bad_body(self, client):
        response = client.post("/api/leaderboard/2025/compute", json={"entries": [{"name": "no id"}]})

        assert response.status_code == 422


    def test_non_json_database_response_is_bad_gateway(self, app, client):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html></html>"))
        settings = Settings(firebase_database_url="https://club.test")

        async def firebase():
            async with FirebaseClient(settings=settings, transport=transport) as firebase_client:
                yield firebase_client

        del app.dependency_overrides[get_club_data]
        app.dependency_overrides[get_firebase_client] = firebase

        response = client.get("/api/leaderboard/2025")

        assert response.status_code == 502
        assert "Invalid JSON" in response.json()["detail"]


class TestVizRoutes:

    def test_rides_chart(self, client):
        response = client.get("/api/viz/2025/leaderboard")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Carol" in response.text

    def test_group_chart(self, client):
        response = client.get("/api/viz/2025/groups")

        assert response.status_code == 200
        assert "B2" in response.text
