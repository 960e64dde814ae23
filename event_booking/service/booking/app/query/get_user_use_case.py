from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_booking.platform.config.di import Container
from event_booking.platform.exception.exceptions import NotFoundError
from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.interface.i_user_query_repo import IUserQueryRepo
from event_booking.service.booking.domain.entity.user_entity import UserEntity


class GetUserUseCase:
    def __init__(self, user_query_repo: IUserQueryRepo) -> None:
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(user_query_repo=user_query_repo)

    @Logger.io
    async def get_by_id(self, *, user_id: int) -> UserEntity:
        user = await self.user_query_repo.get_by_id(user_id=user_id)
        if user is None:
            raise NotFoundError('User not found')
        return user
