import pytest
from fastapi.testclient import TestClient

from fakes import FakeSupabase, Upstream, make_gateway


@pytest.fixture
def upstream() -> Upstream:
    return Upstream()


@pytest.fixture
def fake_db() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def app(upstream, fake_db):
    from investours.main import app
    from investours.api.dependencies import get_gateway, get_supabase
    from investours.middleware.rate_limit import limiter

    limiter.enabled = False
    gateway = make_gateway(upstream)
    app.dependency_overrides[get_gateway] = lambda: gateway
    app.dependency_overrides[get_supabase] = lambda: fake_db
    yield app
    app.dependency_overrides.clear()
    limiter.enabled = True


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client
