from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_booking.platform.config.di import Container
from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.interface.i_user_command_repo import IUserCommandRepo
from event_booking.service.booking.domain.entity.user_entity import UserEntity


class CreateUserUseCase:
    def __init__(self, user_command_repo: IUserCommandRepo) -> None:
        self.user_command_repo = user_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
    ) -> Self:
        return cls(user_command_repo=user_command_repo)

    @Logger.io
    async def create(self, *, name: Optional[str], email: Optional[str]) -> UserEntity:
        user = UserEntity.create(name=name, email=email)
        created = await self.user_command_repo.create(user=user)
        Logger.base.info(f'👤 [CREATE_USER] Registered user {created.id}')
        return created
