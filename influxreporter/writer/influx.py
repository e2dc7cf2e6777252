"""Write points to an InfluxDB 2.x compatible HTTP API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import aiohttp
import async_timeout
from yarl import URL

from ..const import DEFAULT_BATCH_SIZE, DEFAULT_WRITE_TIMEOUT
from ..exceptions import ReporterConfigError, ReporterWriteError
from .base import WriteSink

if TYPE_CHECKING:
    from ..reporter.point import Point

_LOGGER = logging.getLogger(__name__)

WRITE_PATH = "api/v2/write"


class InfluxWriteSink(WriteSink):
    """Buffer points and post them as line protocol on flush."""

    def __init__(
        self,
        server_url: str,
        token: str,
        org: str,
        bucket: str,
        *,
        timeout: float | None = None,
        batch_size: int | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize InfluxWriteSink."""
        try:
            url = URL(server_url)
        except ValueError as err:
            raise ReporterConfigError(f"Invalid server URL: {server_url}") from err
        if url.scheme not in ("http", "https") or not url.host:
            raise ReporterConfigError(f"Invalid server URL: {server_url}")
        if not org or not bucket:
            raise ReporterConfigError("Organization and bucket are required")

        self._write_url = url / WRITE_PATH
        self._params = {"org": org, "bucket": bucket, "precision": "ns"}
        self._headers = {
            "Authorization": f"Token {token}",
            "Content-Type": "text/plain; charset=utf-8",
        }
        self._timeout: float = timeout or DEFAULT_WRITE_TIMEOUT
        self._batch_size: int = batch_size or DEFAULT_BATCH_SIZE
        self._session = session
        self._own_session = session is None
        self._buffer: list[Point] = []

    @property
    def write_url(self) -> URL:
        """Return URL points are posted to."""
        return self._write_url

    @property
    def pending(self) -> int:
        """Return number of queued points."""
        return len(self._buffer)

    def enqueue(self, point: Point) -> None:
        """Queue a point for the next flush."""
        self._buffer.append(point)

    async def flush(self) -> None:
        """Post all queued points."""
        points, self._buffer = self._buffer, []
        lines = [line for point in points if (line := point.to_line_protocol())]
        if not lines:
            return

        for start in range(0, len(lines), self._batch_size):
            await self._post("\n".join(lines[start : start + self._batch_size]))
        _LOGGER.debug("Wrote %d points to %s", len(lines), self._write_url)

    async def close(self) -> None:
        """Close the HTTP session if we own it."""
        self._buffer.clear()
        if self._session is None or not self._own_session:
            return
        session, self._session = self._session, None
        await session.close()

    async def _post(self, body: str) -> None:
        if self._session is None:
            self._session = aiohttp.ClientSession()

        try:
            async with async_timeout.timeout(self._timeout):
                async with self._session.post(
                    self._write_url,
                    params=self._params,
                    headers=self._headers,
                    data=body.encode("utf-8"),
                ) as response:
                    if response.status >= 300:
                        message = await response.text()
                        raise ReporterWriteError(
                            f"Write rejected with status {response.status}: {message}",
                        )
        except TimeoutError as err:
            raise ReporterWriteError(
                f"Write to {self._write_url} timed out",
            ) from err
        except aiohttp.ClientError as err:
            raise ReporterWriteError(
                f"Write to {self._write_url} failed: {err}",
            ) from err
