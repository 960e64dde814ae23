import asyncpg
import pytest

from event_booking.platform.exception.exceptions import (
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from event_booking.service.booking.domain.entity.event_entity import EventEntity
from event_booking.service.booking.domain.entity.user_entity import UserEntity
from event_booking.service.booking.domain.value_object.event_patch import EventPatch
from event_booking.service.booking.driven_adapter.repo.event_command_repo_impl import (
    EventCommandRepoImpl,
)
from event_booking.service.booking.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from test.service.booking.unit.helpers import NOW, FakePool, event_row


@pytest.mark.unit
class TestEventCommandRepo:
    async def test_create_inserts_with_full_availability(self):
        pool = FakePool()
        pool.conn.fetchrow.return_value = event_row(id=5, total_seats=10, seats_available=10)
        repo = EventCommandRepoImpl(pool_factory=pool.factory())

        event = await repo.create(event=EventEntity(name='Concert', total_seats=10))

        assert event.id == 5
        args = pool.conn.fetchrow.call_args.args
        assert args[1:] == ('Concert', None, 10, 10)

    async def test_update_recomputes_availability_under_lock(self):
        pool = FakePool()
        conn = pool.conn
        # 4 seats booked
        conn.fetchrow.side_effect = [
            event_row(total_seats=10, seats_available=6),
            event_row(total_seats=20, seats_available=16),
        ]
        repo = EventCommandRepoImpl(pool_factory=pool.factory())

        event = await repo.update(event_id=1, patch=EventPatch(total_seats=20))

        assert 'FOR UPDATE' in conn.fetchrow.call_args_list[0].args[0]
        update_args = conn.fetchrow.call_args_list[1].args
        assert update_args[1:] == (1, 'Concert', None, 20, 16)
        assert event.seats_available == 16
        conn.tx.commit.assert_awaited_once()

    async def test_update_below_booked_rolls_back(self):
        pool = FakePool()
        conn = pool.conn
        conn.fetchrow.return_value = event_row(total_seats=10, seats_available=6)
        repo = EventCommandRepoImpl(pool_factory=pool.factory())

        with pytest.raises(ValidationError, match='less than already booked'):
            await repo.update(event_id=1, patch=EventPatch(total_seats=3))

        assert conn.fetchrow.await_count == 1
        conn.tx.rollback.assert_awaited_once()
        conn.tx.commit.assert_not_awaited()

    async def test_update_missing_event(self):
        pool = FakePool()
        pool.conn.fetchrow.return_value = None
        repo = EventCommandRepoImpl(pool_factory=pool.factory())

        with pytest.raises(NotFoundError, match='Event not found'):
            await repo.update(event_id=1, patch=EventPatch(name='Gala'))

    async def test_delete_missing_event(self):
        pool = FakePool()
        pool.conn.fetchval.return_value = None
        repo = EventCommandRepoImpl(pool_factory=pool.factory())

        with pytest.raises(NotFoundError, match='Event not found'):
            await repo.delete(event_id=1)

    async def test_delete(self):
        pool = FakePool()
        pool.conn.fetchval.return_value = 1
        repo = EventCommandRepoImpl(pool_factory=pool.factory())

        await repo.delete(event_id=1)

        assert 'DELETE FROM events' in pool.conn.fetchval.call_args.args[0]


@pytest.mark.unit
class TestUserCommandRepo:
    async def test_create(self):
        pool = FakePool()
        pool.conn.fetchrow.return_value = {
            'id': 1,
            'name': 'Alice',
            'email': 'alice@example.com',
            'created_at': NOW,
        }
        repo = UserCommandRepoImpl(pool_factory=pool.factory())

        user = await repo.create(user=UserEntity(name='Alice', email='alice@example.com'))

        assert user.id == 1
        assert user.created_at == NOW

    async def test_duplicate_email_is_conflict(self):
        pool = FakePool()
        pool.conn.fetchrow.side_effect = asyncpg.exceptions.UniqueViolationError('users_email_key')
        repo = UserCommandRepoImpl(pool_factory=pool.factory())

        with pytest.raises(ConflictError, match='Email already exists'):
            await repo.create(user=UserEntity(name='Alice', email='alice@example.com'))

    async def test_unexpected_driver_error_is_internal(self):
        pool = FakePool()
        pool.conn.fetchrow.side_effect = ConnectionRefusedError('db down')
        repo = UserCommandRepoImpl(pool_factory=pool.factory())

        with pytest.raises(InternalError):
            await repo.create(user=UserEntity(name='Alice', email='alice@example.com'))
