import os
import tempfile
import uuid

import pytest
import pytest_asyncio

_TEST_DIR = tempfile.mkdtemp(prefix="carcloud-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TEST_DIR, 'api.sqlite3')}"
os.environ["ACCESS_TOKEN_SECRET"] = "test-secret-with-enough-bytes-for-hs256"
os.environ["ENVIRONMENT"] = "development"

TEST_SECRET = os.environ["ACCESS_TOKEN_SECRET"]


@pytest.fixture(autouse=True, scope="session")
def setup_test_db():
    import asyncio

    from app.database import database
    from app.seed import seed_data

    async def _setup():
        await database.connect()
        async with database.session() as session:
            await seed_data(session)

    asyncio.run(_setup())
    yield
    asyncio.run(database.disconnect())


@pytest_asyncio.fixture
async def db_session(tmp_path):
    """Session on a private database, isolated from the API tests."""
    from app.database import Database

    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'unit.sqlite3'}")
    await db.connect()
    async with db.session() as session:
        yield session
    await db.disconnect()


@pytest_asyncio.fixture
async def isolated_db(tmp_path):
    from app.database import Database

    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'isolated.sqlite3'}")
    await db.connect()
    yield db
    await db.disconnect()


def unique_email(prefix: str = "user") -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8]}@example.com"


def car_payload(owner_email: str, **overrides) -> dict:
    payload = {
        "owner": {"email": owner_email, "name": "Owner"},
        "brand": "Toyota",
        "model": "Corolla",
        "price": 40,
        "location": "Dhaka",
    }
    payload.update(overrides)
    return payload
