"""Pytest fixtures for InfluxReporter."""

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from datetime import UTC, datetime
import logging
from unittest.mock import AsyncMock, MagicMock

from aiohttp import web
import pytest
from pytest_aiohttp import AiohttpServer

from influxreporter.metrics import Registry
from influxreporter.writer import WriteSink

_LOGGER = logging.getLogger(__name__)

logging.basicConfig(level=logging.DEBUG)

# 2026-01-01 12:00:07.345 UTC
NOW = datetime(2026, 1, 1, 12, 0, 7, tzinfo=UTC)
NOW_NS = int(NOW.timestamp()) * 1_000_000_000 + 345_000_000
NOW_ALIGNED_NS = int(NOW.replace(second=0).timestamp()) * 1_000_000_000


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, now: float = 0.0) -> None:
        """Initialize FakeClock."""
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class InfluxRequest:
    """Represent a write request received by the fake server."""

    query: dict[str, str]
    headers: dict[str, str]
    body: str


@dataclass
class InfluxServer:
    """Represent a fake InfluxDB write endpoint."""

    url: str
    requests: list[InfluxRequest] = field(default_factory=list)
    status: int = 204
    message: str = ""


@pytest.fixture
def fake_clock() -> FakeClock:
    """Create a hand driven monotonic clock."""
    return FakeClock()


@pytest.fixture
def registry() -> Registry:
    """Create an empty metrics registry."""
    return Registry()


@pytest.fixture
def sink() -> MagicMock:
    """Create a mocked write sink."""
    mock_sink = MagicMock(spec=WriteSink)
    mock_sink.flush = AsyncMock()
    mock_sink.close = AsyncMock()
    return mock_sink


@pytest.fixture
async def influx_server(
    aiohttp_server: AiohttpServer,
) -> AsyncGenerator[InfluxServer, None]:
    """Create a fake InfluxDB write endpoint."""
    server_info: InfluxServer | None = None

    async def write(request: web.Request) -> web.Response:
        """Record the posted points."""
        server_info.requests.append(
            InfluxRequest(
                dict(request.query),
                dict(request.headers),
                await request.text(),
            ),
        )
        if server_info.status >= 300:
            return web.json_response(
                {"code": "invalid", "message": server_info.message},
                status=server_info.status,
            )
        return web.Response(status=server_info.status)

    app = web.Application()
    app.add_routes([web.post("/api/v2/write", write)])
    server = await aiohttp_server(app)
    server_info = InfluxServer(str(server.make_url("/")))

    yield server_info

    await server.close()
