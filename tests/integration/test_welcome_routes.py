"""Integration tests for the welcome endpoint and framework fallbacks."""

from fastapi.testclient import TestClient

WELCOME = "Welcome to Everfit Application!"


class TestWelcomeEndpoint:
    """Tests for GET / endpoint."""

    def test_welcome_returns_200(self, client: TestClient):
        """Welcome endpoint returns 200."""
        response = client.get("/")

        assert response.status_code == 200

    def test_welcome_body_is_exact(self, client: TestClient):
        """Body is the welcome message byte for byte."""
        response = client.get("/")

        assert response.content == WELCOME.encode()

    def test_welcome_is_plain_text(self, client: TestClient):
        """Welcome endpoint responds with a text content type."""
        response = client.get("/")

        assert response.headers["content-type"].startswith("text/plain")

    def test_welcome_is_idempotent(self, client: TestClient):
        """Repeated requests yield identical responses."""
        bodies = {client.get("/").text for _ in range(5)}

        assert bodies == {WELCOME}


class TestFrameworkDefaults:
    """Unknown paths and methods fall through to the framework."""

    def test_unknown_path_returns_404(self, client: TestClient):
        response = client.get("/unknown")

        assert response.status_code == 404

    def test_post_to_root_is_not_allowed(self, client: TestClient):
        response = client.post("/")

        assert response.status_code == 405

    def test_post_to_health_is_not_allowed(self, client: TestClient):
        response = client.post("/health")

        assert response.status_code != 200
