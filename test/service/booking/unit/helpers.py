"""In-memory stand-ins for the asyncpg pool, connection and transaction."""

from datetime import datetime, timezone
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock


NOW = datetime(2025, 1, 10, 10, 30, tzinfo=timezone.utc)


def event_row(
    *,
    id: int = 1,
    name: str = 'Concert',
    description: Optional[str] = None,
    total_seats: int = 10,
    seats_available: int = 10,
) -> dict[str, Any]:
    return {
        'id': id,
        'name': name,
        'description': description,
        'total_seats': total_seats,
        'seats_available': seats_available,
        'created_at': NOW,
        'updated_at': NOW,
    }


class FakeTransaction:
    def __init__(self, *, rollback_error: Optional[Exception] = None) -> None:
        self.start = AsyncMock()
        self.commit = AsyncMock()
        self.rollback = AsyncMock(side_effect=rollback_error)


class FakeConnection:
    def __init__(self, *, rollback_error: Optional[Exception] = None) -> None:
        self.tx = FakeTransaction(rollback_error=rollback_error)
        self.fetchrow = AsyncMock()
        self.fetchval = AsyncMock()
        self.execute = AsyncMock()

    def transaction(self) -> FakeTransaction:
        return self.tx


class _Acquire:
    def __init__(self, pool: 'FakePool') -> None:
        self.pool = pool

    async def __aenter__(self) -> FakeConnection:
        if self.pool.acquire_error is not None:
            raise self.pool.acquire_error
        self.pool.acquired += 1
        return self.pool.conn

    async def __aexit__(self, *exc_info: Any) -> None:
        self.pool.released += 1


class FakePool:
    def __init__(
        self,
        conn: Optional[FakeConnection] = None,
        *,
        acquire_error: Optional[Exception] = None,
    ) -> None:
        self.conn = conn or FakeConnection()
        self.acquire_error = acquire_error
        self.acquired = 0
        self.released = 0
        self.acquire_timeouts: list[Optional[float]] = []

    def acquire(self, *, timeout: Optional[float] = None) -> _Acquire:
        self.acquire_timeouts.append(timeout)
        return _Acquire(self)

    def factory(self) -> MagicMock:
        """Awaitable pool factory, as injected into the command repos."""
        return AsyncMock(return_value=self)
