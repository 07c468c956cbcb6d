"""End-to-end tests for the question routes."""

import json

import pytest
from fastapi.testclient import TestClient

from qna.interface.api.app import create_app
from tests.di import make_test_settings

RUST_QUESTION = {
    "id": 1,
    "title": "What is Rust?",
    "content": "Rust is a systems programming language.",
    "tags": ["rust"],
}


def add_question(client, **overrides):
    response = client.post("/questions", json={**RUST_QUESTION, **overrides})
    assert response.status_code == 200, response.text
    return response


class TestRoot:
    """Tests for the entry point and health routes."""

    def test_welcome_text(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text.startswith("Welcome")

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["storage_backend"] == "memory"
        assert response.json()["profanity_filter"] == "passthrough"
        assert response.json()["protect_writes"] is False


class TestAddAndGet:
    """Tests for POST /questions and GET /question."""

    def test_add_then_get(self, client):
        response = add_question(client)

        assert response.text == "Question added"
        fetched = client.get("/question", params={"id": 1})
        assert fetched.status_code == 200
        assert fetched.json() == RUST_QUESTION

    def test_responses_are_pretty_printed(self, client):
        add_question(client)

        response = client.get("/question", params={"id": 1})

        assert response.text.startswith('{\n  "id": 1')

    def test_empty_tags_omitted(self, client):
        add_question(client, tags=[])

        assert "tags" not in client.get("/question", params={"id": 1}).json()

    def test_id_assigned_when_omitted(self, client):
        body = {k: v for k, v in RUST_QUESTION.items() if k != "id"}

        client.post("/questions", json=body)
        client.post("/questions", json=body)

        assert [q["id"] for q in client.get("/questions").json()] == [1, 2]

    def test_duplicate_id_conflicts(self, client):
        add_question(client)

        response = client.post("/questions", json=RUST_QUESTION)

        assert response.status_code == 409
        assert response.text.startswith("Duplicate identifier")

    def test_unknown_question(self, client):
        response = client.get("/question", params={"id": 5})

        assert response.status_code == 404
        assert response.text == "Question not found"

    def test_missing_id(self, client):
        response = client.get("/question")

        assert response.status_code == 400
        assert response.text == "Missing parameter"

    def test_invalid_id(self, client):
        response = client.get("/question", params={"id": "abc"})

        assert response.status_code == 400
        assert "Invalid identifier" in response.text

    def test_malformed_body(self, client):
        response = client.post("/questions", json={"title": "no content"})

        assert response.status_code == 400
        assert "content" in response.text

    def test_title_too_long(self, client):
        response = client.post(
            "/questions", json={**RUST_QUESTION, "title": "x" * 256}
        )

        assert response.status_code == 400


class TestListQuestions:
    """Tests for GET /questions."""

    def test_range(self, client):
        for i in (1, 2, 3, 10):
            add_question(client, id=i, title=f"Q{i}")

        response = client.get("/questions", params={"start": 2, "end": 10})

        assert response.status_code == 200
        assert [q["id"] for q in response.json()] == [2, 3, 10]

    def test_empty_range(self, client):
        add_question(client)

        response = client.get("/questions", params={"start": 2, "end": 5})

        assert response.json() == []

    def test_one_bound_missing(self, client):
        response = client.get("/questions", params={"start": 1})

        assert response.status_code == 400
        assert response.text == "Missing parameter"


class TestUpdateAndDelete:
    """Tests for PUT and DELETE /questions."""

    def test_update(self, client):
        add_question(client)

        response = client.put(
            "/questions",
            params={"id": 1},
            json={"title": "Updated", "content": "New content"},
        )

        assert response.status_code == 200
        assert response.text == "Question updated"
        assert client.get("/question", params={"id": 1}).json() == {
            "id": 1,
            "title": "Updated",
            "content": "New content",
        }

    def test_update_uses_body_id_without_query(self, client):
        add_question(client)

        response = client.put(
            "/questions", json={"id": 1, "title": "Updated", "content": "c"}
        )

        assert response.status_code == 200

    def test_update_unknown(self, client):
        response = client.put(
            "/questions", params={"id": 3}, json={"title": "t", "content": "c"}
        )

        assert response.status_code == 404
        assert response.text == "Question not found"

    def test_delete(self, client):
        add_question(client)

        response = client.delete("/questions", params={"id": 1})

        assert response.status_code == 200
        assert response.text == "Question deleted"
        assert client.delete("/questions", params={"id": 1}).status_code == 404


class TestFallbacks:
    """Unknown routes and methods."""

    def test_unknown_route(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.text == "Not Found"

    def test_unknown_method(self, client):
        response = client.patch("/questions")

        assert response.status_code == 404
        assert response.text == "Not Found"


class TestCors:
    """CORS preflight."""

    def test_allowed_origin(self, client):
        response = client.options(
            "/questions",
            headers={
                "Origin": "http://localhost:8080",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:8080"
        assert response.headers["access-control-max-age"] == "600"

    def test_other_origin_rejected(self, client):
        response = client.options(
            "/questions",
            headers={
                "Origin": "http://evil.example",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert "access-control-allow-origin" not in response.headers


class TestSeedFile:
    """Startup with a seed file for the memory store."""

    def test_seeded_questions_listed(self, tmp_path):
        path = tmp_path / "questions.json"
        path.write_text(json.dumps([RUST_QUESTION]))
        settings = make_test_settings(storage={"seed_file": str(path)})

        with TestClient(create_app(settings)) as client:
            response = client.get("/questions")

        assert response.status_code == 200
        assert response.json() == [RUST_QUESTION]

    def test_missing_seed_file_fails_startup(self, tmp_path):
        settings = make_test_settings(
            storage={"seed_file": str(tmp_path / "missing.json")}
        )

        with pytest.raises(Exception, match="missing.json"):
            with TestClient(create_app(settings)):
                pass
