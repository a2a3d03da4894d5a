import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from backend.api.deps.dependencies import get_user_service
from backend.api.main import create_app
from backend.api.throttling import throttle_rule
from backend.configs import ApiSettings, DatabaseSettings, Settings
from backend.models.common import PageMeta
from backend.models.user import UserPage


def make_client(mock_user_service, **api_overrides):
    settings = Settings(
        database=DatabaseSettings(url="sqlite+aiosqlite:///:memory:"),
        api=ApiSettings(**api_overrides),
    )
    app = create_app(settings)
    app.dependency_overrides[get_user_service] = lambda: mock_user_service
    return TestClient(app)


@pytest.fixture
def mock_user_service(make_user):
    service = AsyncMock()
    service.find_all.return_value = UserPage(data=[], meta=PageMeta(limit=10, has_next_page=False))
    service.find_one.return_value = make_user(id="u1")
    return service


def test_request_over_limit_is_rejected(mock_user_service):
    client = make_client(mock_user_service, throttle_limit=2, throttle_ttl=60)

    statuses = [client.get("/api/v1/users").status_code for _ in range(3)]

    assert statuses == [200, 200, 429]


def test_rejection_uses_error_envelope(mock_user_service):
    client = make_client(mock_user_service, throttle_limit=1)
    client.get("/api/v1/users")

    response = client.get("/api/v1/users", headers={"X-Correlation-ID": "req-429"})

    assert response.status_code == 429
    body = response.json()
    assert body["success"] is False
    assert body["statusCode"] == 429
    assert body["error"] == "Too Many Requests"
    assert body["message"] == "Too many requests, try again later"
    assert body["path"] == "/api/v1/users"
    assert response.headers["X-Correlation-ID"] == "req-429"
    assert mock_user_service.find_all.await_count == 1


def test_limit_is_counted_per_route(mock_user_service):
    client = make_client(mock_user_service, throttle_limit=1)

    assert client.get("/api/v1/users").status_code == 200
    assert client.get("/api/v1/users").status_code == 429
    assert client.get("/api/v1/users/u1").status_code == 200


def test_throttle_runs_before_role_check(mock_user_service):
    client = make_client(mock_user_service, throttle_limit=1)
    client.delete("/api/v1/users/u1")

    response = client.delete("/api/v1/users/u1")

    assert response.status_code == 429


def test_health_is_not_throttled(mock_user_service):
    client = make_client(mock_user_service, throttle_limit=1)

    statuses = {client.get("/api/v1/health").status_code for _ in range(3)}

    assert statuses == {503}


def test_throttling_can_be_disabled(mock_user_service):
    client = make_client(mock_user_service, throttle_limit=1, throttle_enabled=False)

    statuses = [client.get("/api/v1/users").status_code for _ in range(3)]

    assert statuses == [200, 200, 200]


def test_throttle_rule_renders_window():
    assert throttle_rule(ApiSettings(throttle_limit=100, throttle_ttl=60)) == "100 per 60 seconds"
