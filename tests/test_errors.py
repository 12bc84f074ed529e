import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from app.database import get_db
from app.main import app


async def _broken_db():
    raise OperationalError("SELECT 1", {}, Exception("connection refused"))
    yield  # pragma: no cover


@pytest.mark.asyncio
async def test_storage_failure_maps_to_503():
    app.dependency_overrides[get_db] = _broken_db
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/latest-cars")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
    assert response.json() == {"status": "error", "data": None, "message": "storage unavailable"}


@pytest.mark.asyncio
async def test_unexpected_failure_maps_to_500():
    async def _exploding_db():
        raise RuntimeError("boom")
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = _exploding_db
    try:
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/latest-cars")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json()["status"] == "error"
