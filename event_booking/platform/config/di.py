"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from event_booking.platform.config.core_setting import Settings
from event_booking.platform.database.asyncpg_setting import get_asyncpg_pool
from event_booking.platform.database.orm_db_setting import Database
from event_booking.service.booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from event_booking.service.booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from event_booking.service.booking.driven_adapter.repo.event_command_repo_impl import (
    EventCommandRepoImpl,
)
from event_booking.service.booking.driven_adapter.repo.event_query_repo_impl import (
    EventQueryRepoImpl,
)
from event_booking.service.booking.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from event_booking.service.booking.driven_adapter.repo.user_query_repo_impl import (
    UserQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Read path: SQLAlchemy sessions bound to the current event loop
    database = providers.Singleton(Database)

    # Write path: process-wide asyncpg pool, opened in the lifespan before serving
    asyncpg_pool_factory = providers.Object(get_asyncpg_pool)

    # Command repositories (raw SQL, row locks)
    event_command_repo = providers.Singleton(
        EventCommandRepoImpl, pool_factory=asyncpg_pool_factory
    )
    user_command_repo = providers.Singleton(UserCommandRepoImpl, pool_factory=asyncpg_pool_factory)
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl, pool_factory=asyncpg_pool_factory
    )

    # Query repositories (stateless - use session_factory per-request)
    event_query_repo = providers.Singleton(
        EventQueryRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
