"""API test fixtures — app built from fake connectors + httpx client.

Invariants:
    - Every test gets its own upload directory (tmp_path)
    - Connectors are fakes; no test opens a network connection
    - Lifespan is NOT run by the client; tests that need it enter it explicitly
"""

import pytest
from fastapi import APIRouter
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.infrastructure.context import AppContext
from app.main import create_app
from tests.fake_connectors import FakeConnector

ALLOWED_ORIGINS = ["http://localhost:5173", "https://shop.example.com"]


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir):
    return Settings(
        _env_file=None,
        upload_dir=str(upload_dir),
        cors_origins=ALLOWED_ORIGINS,
    )


@pytest.fixture
def connector_log():
    return []


@pytest.fixture
def context(settings, connector_log):
    return AppContext(
        settings=settings,
        database=FakeConnector("database", connector_log),
        media=FakeConnector("media", connector_log),
    )


@pytest.fixture
def handler_calls():
    """Names of route groups whose handler actually ran."""
    return []


@pytest.fixture
def probe_groups(handler_calls):
    """One router per real prefix, each answering GET /whoami with its name."""
    groups = {}
    for name in (
        "user", "seller", "product", "cart", "address", "order", "payment",
    ):
        router = APIRouter()

        def make_handler(group: str):
            async def whoami():
                handler_calls.append(group)
                return {"group": group}
            return whoami

        router.add_api_route("/whoami", make_handler(name), methods=["GET"])
        groups[f"/api/{name}"] = router
    return groups


@pytest.fixture
def app(context, probe_groups):
    return create_app(context, route_groups=probe_groups)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
