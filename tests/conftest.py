import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from starlette.applications import Starlette

from tests.helpers import RecordingMultiplexer


@pytest.fixture
def app() -> Starlette:
    return Starlette()


@pytest.fixture
def mux() -> RecordingMultiplexer:
    return RecordingMultiplexer()


@pytest_asyncio.fixture
async def client(app: Starlette) -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
