import pytest

from event_booking.platform.config.core_setting import settings
from event_booking.platform.database.transaction import acquire_connection, transaction
from test.service.booking.unit.helpers import FakeConnection, FakePool


@pytest.mark.unit
class TestTransaction:
    async def test_commit_on_success(self):
        conn = FakeConnection()

        async with transaction(conn) as tx_conn:
            assert tx_conn is conn

        conn.tx.start.assert_awaited_once()
        conn.tx.commit.assert_awaited_once()
        conn.tx.rollback.assert_not_awaited()

    async def test_rollback_on_error(self):
        conn = FakeConnection()

        with pytest.raises(ValueError, match='boom'):
            async with transaction(conn):
                raise ValueError('boom')

        conn.tx.rollback.assert_awaited_once()
        conn.tx.commit.assert_not_awaited()

    async def test_rollback_failure_keeps_original_error(self):
        conn = FakeConnection(rollback_error=OSError('connection lost'))

        with pytest.raises(ValueError, match='boom'):
            async with transaction(conn):
                raise ValueError('boom')

        conn.tx.rollback.assert_awaited_once()


@pytest.mark.unit
class TestAcquireConnection:
    async def test_connection_is_released_on_every_exit(self):
        pool = FakePool()

        with pytest.raises(RuntimeError):
            async with acquire_connection(pool.factory()):
                raise RuntimeError('fail')

        async with acquire_connection(pool.factory()) as conn:
            assert conn is pool.conn

        assert pool.acquired == 2
        assert pool.released == 2

    async def test_acquire_uses_configured_timeout(self):
        pool = FakePool()

        async with acquire_connection(pool.factory()):
            pass

        assert pool.acquire_timeouts == [settings.DB_POOL_ACQUIRE_TIMEOUT]
