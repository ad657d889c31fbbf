"""API test fixtures: FastAPI app behind an httpx async client.

Design Decisions:
    - ASGITransport: requests go straight into the app, no server process
"""

import pytest
from httpx import ASGITransport, AsyncClient

from sofia_blend.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac
