# =============================================================================
# tests/test_health.py - Health Endpoint Tests
# =============================================================================

from sqlalchemy.exc import OperationalError

from app import __version__


class TestHealth:
    """Tests for GET /health and GET /."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "development"
        assert body["version"] == __version__

    def test_root(self, client):
        body = client.get("/").json()

        assert body["name"] == "ExampleModel API"
        assert body["health"] == "/health"


class TestReadiness:
    """Tests for GET /health/ready."""

    def test_ready_when_database_reachable(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"
        assert response.json()["checks"] == {"database": "healthy"}

    def test_degraded_when_database_unreachable(self, client, monkeypatch):
        def fail(session):
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        monkeypatch.setattr("app.routers.health.check_connection", fail)

        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "degraded"
        assert body["checks"]["database"].startswith("unhealthy")


class TestLiveness:
    """Tests for GET /health/live."""

    def test_alive(self, client):
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"
