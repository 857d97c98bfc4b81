from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_user_command_repo import IUserCommandRepo


class DeleteUserUseCase:
    def __init__(self, *, user_command_repo: IUserCommandRepo) -> None:
        self.user_command_repo = user_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
    ) -> Self:
        return cls(user_command_repo=user_command_repo)

    @Logger.io
    async def execute(self, *, user_id: int, requested_by: int) -> None:
        if user_id == requested_by:
            raise DomainError('You cannot delete your own account')

        if not await self.user_command_repo.delete(user_id=user_id):
            raise NotFoundError('User not found')
        Logger.base.info(f'🗑️ [DELETE_USER] User {user_id} deleted by admin {requested_by}')
