from collections.abc import Generator
from unittest.mock import AsyncMock, Mock

from dependency_injector import providers
import pytest

from event_booking.platform.config.di import container
from event_booking.service.booking.domain.entity.user_entity import UserEntity


def _mock_repo(*method_names: str) -> Mock:
    repo = Mock()
    for name in method_names:
        setattr(repo, name, AsyncMock())
    return repo


@pytest.fixture
def repos() -> Generator[dict[str, Mock], None, None]:
    """Replace every repository in the DI container with a mock for one test."""
    mocks = {
        'event_command_repo': _mock_repo('create', 'update', 'delete'),
        'event_query_repo': _mock_repo('get_by_id', 'list_events'),
        'user_command_repo': _mock_repo('create'),
        'user_query_repo': _mock_repo('get_by_id'),
        'booking_command_repo': _mock_repo('reserve_seats'),
        'booking_query_repo': _mock_repo('list_for_event', 'list_for_user', 'list_all'),
    }
    mocks['user_query_repo'].get_by_id.return_value = UserEntity(
        id=1, name='Alice', email='alice@example.com'
    )
    for name, mock in mocks.items():
        getattr(container, name).override(providers.Object(mock))

    yield mocks

    for name in mocks:
        getattr(container, name).reset_override()
