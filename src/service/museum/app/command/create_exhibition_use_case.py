from datetime import date
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_exhibition_command_repo import IExhibitionCommandRepo
from src.service.museum.domain.entity.exhibition_entity import Exhibition
from src.service.museum.domain.enum.exhibition_status import ExhibitionStatus


class CreateExhibitionUseCase:
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
    async def execute(
        self,
        *,
        name: str,
        description: str,
        start_date: date,
        end_date: date,
        price: float,
        image_url: str = '',
        status: ExhibitionStatus = ExhibitionStatus.ACTIVE,
    ) -> Exhibition:
        exhibition = Exhibition(
            name=name,
            description=description,
            start_date=start_date,
            end_date=end_date,
            price=price,
            image_url=image_url,
            status=status,
        )
        created = await self.exhibition_command_repo.create(exhibition)
        Logger.base.info(f'🖼️ [CREATE_EXHIBITION] Exhibition {created.id} "{created.name}" created')
        return created
