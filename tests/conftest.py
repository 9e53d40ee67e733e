from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Yield an HTTPX async client wired straight to the ASGI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


@pytest.fixture
def mock_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], AsyncClient]:
    """Return a factory for HTTPX async clients whose responses come from a handler."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> AsyncClient:
        return AsyncClient(transport=httpx.MockTransport(handler))

    return factory
