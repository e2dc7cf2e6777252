"""No-operation write sink for disabled reporting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import WriteSink

if TYPE_CHECKING:
    from ..reporter.point import Point


class NoOpWriteSink(WriteSink):
    """No-operation write sink with zero overhead."""

    def enqueue(self, point: Point) -> None:
        """No-op enqueue implementation."""

    async def flush(self) -> None:
        """No-op flush implementation."""

    async def close(self) -> None:
        """No-op close implementation."""
