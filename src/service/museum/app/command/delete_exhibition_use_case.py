from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_exhibition_command_repo import IExhibitionCommandRepo


class DeleteExhibitionUseCase:
    def __init__(self, *, exhibition_command_repo: IExhibitionCommandRepo) -> None:
        self.exhibition_command_repo = exhibition_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        exhibition_command_repo: IExhibitionCommandRepo = Depends(
            Provide[Container.exhibition_command_repo]
        ),
    ) -> Self:
        return cls(exhibition_command_repo=exhibition_command_repo)

    @Logger.io
    async def execute(self, *, exhibition_id: int) -> None:
        # Past bookings keep their own copy of the exhibition name and price
        if not await self.exhibition_command_repo.delete(exhibition_id=exhibition_id):
            raise NotFoundError('Exhibition not found')
        Logger.base.info(f'🗑️ [DELETE_EXHIBITION] Exhibition {exhibition_id} deleted')
