from unittest.mock import AsyncMock, Mock

import pytest

from event_booking.platform.exception.exceptions import NotFoundError, ValidationError
from event_booking.service.booking.app.command.create_event_use_case import CreateEventUseCase
from event_booking.service.booking.app.command.delete_event_use_case import DeleteEventUseCase
from event_booking.service.booking.app.command.update_event_use_case import UpdateEventUseCase
from event_booking.service.booking.app.query.get_event_use_case import GetEventUseCase
from event_booking.service.booking.app.query.list_events_use_case import ListEventsUseCase
from event_booking.service.booking.domain.entity.event_entity import EventEntity
from event_booking.service.booking.domain.value_object.event_patch import EventPatch


@pytest.fixture
def mock_event_command_repo():
    repo = Mock()
    repo.create = AsyncMock()
    repo.update = AsyncMock()
    repo.delete = AsyncMock()
    return repo


@pytest.fixture
def mock_event_query_repo():
    repo = Mock()
    repo.get_by_id = AsyncMock()
    repo.list_events = AsyncMock()
    return repo


@pytest.mark.unit
class TestCreateEventUseCase:
    async def test_creates_event_with_full_availability(self, mock_event_command_repo):
        mock_event_command_repo.create.side_effect = lambda *, event: EventEntity(
            id=1, name=event.name, total_seats=event.total_seats, description=event.description
        )
        use_case = CreateEventUseCase(event_command_repo=mock_event_command_repo)

        event = await use_case.create(name='Concert', total_seats=10, description=None)

        assert event.id == 1
        sent = mock_event_command_repo.create.call_args.kwargs['event']
        assert sent.seats_available == 10

    async def test_invalid_event_is_not_stored(self, mock_event_command_repo):
        use_case = CreateEventUseCase(event_command_repo=mock_event_command_repo)

        with pytest.raises(ValidationError):
            await use_case.create(name='', total_seats=10)

        mock_event_command_repo.create.assert_not_awaited()


@pytest.mark.unit
class TestUpdateEventUseCase:
    async def test_builds_patch_from_supplied_fields(self, mock_event_command_repo):
        mock_event_command_repo.update.return_value = EventEntity(
            id=3, name='Concert', total_seats=20, seats_available=16
        )
        use_case = UpdateEventUseCase(event_command_repo=mock_event_command_repo)

        await use_case.update(event_id=3, total_seats=20)

        mock_event_command_repo.update.assert_awaited_once_with(
            event_id=3, patch=EventPatch(total_seats=20)
        )

    async def test_empty_name_is_rejected_before_the_store(self, mock_event_command_repo):
        use_case = UpdateEventUseCase(event_command_repo=mock_event_command_repo)

        with pytest.raises(ValidationError):
            await use_case.update(event_id=3, name='  ')

        mock_event_command_repo.update.assert_not_awaited()

    async def test_not_found_propagates(self, mock_event_command_repo):
        mock_event_command_repo.update.side_effect = NotFoundError('Event not found')
        use_case = UpdateEventUseCase(event_command_repo=mock_event_command_repo)

        with pytest.raises(NotFoundError, match='Event not found'):
            await use_case.update(event_id=999, name='Gala')


@pytest.mark.unit
class TestDeleteEventUseCase:
    async def test_delete(self, mock_event_command_repo):
        use_case = DeleteEventUseCase(event_command_repo=mock_event_command_repo)

        await use_case.delete(event_id=5)

        mock_event_command_repo.delete.assert_awaited_once_with(event_id=5)


@pytest.mark.unit
class TestEventQueries:
    async def test_get_missing_event_is_not_found(self, mock_event_query_repo):
        mock_event_query_repo.get_by_id.return_value = None
        use_case = GetEventUseCase(event_query_repo=mock_event_query_repo)

        with pytest.raises(NotFoundError, match='Event not found'):
            await use_case.get_by_id(event_id=1)

    async def test_list_events_passes_repo_order_through(self, mock_event_query_repo):
        newest = EventEntity(id=2, name='B', total_seats=1)
        oldest = EventEntity(id=1, name='A', total_seats=1)
        mock_event_query_repo.list_events.return_value = [newest, oldest]
        use_case = ListEventsUseCase(event_query_repo=mock_event_query_repo)

        assert await use_case.list_events() == [newest, oldest]
