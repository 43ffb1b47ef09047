"""API test fixtures — FastAPI test client with the engine replaced by FakeEngine.

Invariants:
    - POST path gets a real ServiceHandle whose factory builds the fake and counts builds
    - GET path gets its own factory, so tests can tell the two construction paths apart
    - dependency_overrides cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from agent_gateway.infrastructure.service_handle import ServiceHandle, get_service_handle
from agent_gateway.main import app
from agent_gateway.services.agent_listing import get_listing_factory


@pytest.fixture
def builds():
    """Counts engine constructions per path: {"shared": n, "listing": n}."""
    return {"shared": 0, "listing": 0}


@pytest.fixture
def handle(engine, builds):
    def factory():
        builds["shared"] += 1
        return engine
    return ServiceHandle(factory)


@pytest.fixture
async def client(engine, handle, builds):
    def listing_factory():
        builds["listing"] += 1
        return engine

    app.dependency_overrides[get_service_handle] = lambda: handle
    app.dependency_overrides[get_listing_factory] = lambda: listing_factory

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
