from event_booking.platform.database.asyncpg_setting import get_asyncpg_pool
from event_booking.platform.database.store_error import store_errors
from event_booking.platform.database.transaction import PoolFactory, acquire_connection
from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.interface.i_user_command_repo import IUserCommandRepo
from event_booking.service.booking.domain.entity.user_entity import UserEntity


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, pool_factory: PoolFactory = get_asyncpg_pool) -> None:
        self.pool_factory = pool_factory

    @Logger.io
    async def create(self, *, user: UserEntity) -> UserEntity:
        # users.email is UNIQUE; the constraint arbitrates concurrent sign-ups
        async with store_errors(conflict_message='Email already exists'):
            async with acquire_connection(self.pool_factory) as conn:
                row = await conn.fetchrow(
                    """
                    INSERT INTO users (name, email)
                    VALUES ($1, $2)
                    RETURNING id, name, email, created_at
                    """,
                    user.name,
                    user.email,
                )

        return UserEntity(
            id=row['id'],
            name=row['name'],
            email=row['email'],
            created_at=row['created_at'],
        )
