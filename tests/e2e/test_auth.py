"""End-to-end tests for login and write protection."""

import pytest
from fastapi.testclient import TestClient

from qna.interface.api.app import create_app
from tests.di import make_test_settings

CREDENTIALS = {"client_id": "test-client", "client_secret": "test-secret-value"}
QUESTION = {"id": 1, "title": "What is Rust?", "content": "?"}


class TestLogin:
    """Tests for /login."""

    def test_get_login_with_json_body(self, client):
        response = client.request("GET", "/login", json=CREDENTIALS)

        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "Bearer"
        assert body["access_token"]

    def test_post_login(self, client):
        assert client.post("/login", json=CREDENTIALS).status_code == 200

    def test_wrong_credentials(self, client):
        response = client.post(
            "/login", json={"client_id": "test-client", "client_secret": "nope"}
        )

        assert response.status_code == 401
        assert response.json() == {"status": 401, "error": "Wrong credentials"}

    def test_missing_credentials(self, client):
        response = client.post("/login", json={"client_id": "test-client"})

        assert response.status_code == 400
        assert response.json() == {"status": 400, "error": "Missing credentials"}

    def test_mistyped_credentials(self, client):
        response = client.request(
            "GET", "/login", json={"client_id": None, "client_secret": "x"}
        )

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {"status": 400, "error": "Missing credentials"}

    def test_missing_body(self, client):
        response = client.post("/login")

        assert response.status_code == 400
        assert response.json()["error"] == "Missing credentials"


class TestProtectedWrites:
    """Write routes with auth.protect_writes enabled."""

    @pytest.fixture
    def protected_client(self):
        settings = make_test_settings()
        settings.auth.protect_writes = True
        with TestClient(create_app(settings)) as test_client:
            yield test_client

    def test_write_without_token_rejected(self, protected_client):
        response = protected_client.post("/questions", json=QUESTION)

        assert response.status_code == 400
        assert response.json() == {"status": 400, "error": "Invalid token"}

    def test_write_with_bad_token_rejected(self, protected_client):
        response = protected_client.post(
            "/questions",
            json=QUESTION,
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 400

    def test_write_with_token_accepted(self, protected_client):
        token = protected_client.post("/login", json=CREDENTIALS).json()["access_token"]

        response = protected_client.post(
            "/questions",
            json=QUESTION,
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 200

    def test_reads_stay_open(self, protected_client):
        assert protected_client.get("/questions").status_code == 200

    def test_writes_open_by_default(self, client):
        assert client.post("/questions", json=QUESTION).status_code == 200
