from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from event_booking.platform.database.column_range import is_storable_id
from event_booking.platform.database.store_error import store_errors
from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.interface.i_user_query_repo import IUserQueryRepo
from event_booking.service.booking.domain.entity.user_entity import UserEntity
from event_booking.service.booking.driven_adapter.model.user_model import UserModel


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        if not is_storable_id(user_id):
            return None
        async with store_errors():
            async with self.session_factory() as session:
                result = await session.execute(select(UserModel).where(UserModel.id == user_id))
                user_model = result.scalar_one_or_none()

        if not user_model:
            return None
        return self._model_to_entity(user_model)

    def _model_to_entity(self, user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            name=user_model.name,
            email=user_model.email,
            created_at=user_model.created_at,
        )
