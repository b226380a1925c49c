"""API test fixtures: FastAPI app behind an httpx ASGI client."""

import pytest
from httpx import ASGITransport, AsyncClient

from vigenere_decoder.main import app


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
