"""
Tests for health endpoints and framework-level errors.
"""


class TestHealth:
    """Tests for /health and /ready."""

    async def test_health(self, client):
        """Test the health endpoint reports the service."""
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["service"] == "blog-api"

    async def test_ready(self, client):
        """Test the readiness endpoint queries the database."""
        response = await client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready"}


class TestFrameworkErrors:
    """Tests for errors raised by routing itself."""

    async def test_unknown_route(self, client):
        """Test unknown paths use the same error body."""
        response = await client.get("/nope")

        assert response.status_code == 404
        assert response.json() == {"message": "Not Found"}

    async def test_wrong_method(self, client):
        """Test an unsupported method gives 405."""
        response = await client.patch("/posts", json={})

        assert response.status_code == 405


class TestRequestId:
    """Tests for the request id header."""

    async def test_generated_when_missing(self, client):
        """Test a request id is generated and returned."""
        response = await client.get("/health")

        assert len(response.headers["X-Request-ID"]) == 32

    async def test_echoes_caller_id(self, client):
        """Test the caller's request id is kept."""
        response = await client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
