"""API test fixtures — FastAPI app wired to the per-test database.

Invariants:
    - Each test builds its own app via create_app(); no state leaks between tests
    - app.state.db_manager is set directly (ASGITransport skips the lifespan)

Design Decisions:
    - Doubles replace the repository through app.dependency_overrides, the
      same seam production code uses
"""

import pytest
from httpx import ASGITransport, AsyncClient

from contactbook.config import Settings
from contactbook.main import create_app


@pytest.fixture
def app(db_manager):
    application = create_app(
        Settings(database_url="sqlite+aiosqlite:///:memory:"),
    )
    application.state.db_manager = db_manager
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def create_contact(client):
    """POST a contact and return the response."""
    async def _create(name="Ada", email="ada@example.com", phone="5551234567"):
        return await client.post(
            "/contacts", json={"name": name, "email": email, "phone": phone},
        )
    return _create
