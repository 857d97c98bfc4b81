from datetime import date
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_exhibition_command_repo import IExhibitionCommandRepo
from src.service.museum.app.interface.i_exhibition_query_repo import IExhibitionQueryRepo
from src.service.museum.domain.entity.exhibition_entity import Exhibition
from src.service.museum.domain.enum.exhibition_status import ExhibitionStatus


class UpdateExhibitionUseCase:
    def __init__(
        self,
        *,
        exhibition_command_repo: IExhibitionCommandRepo,
        exhibition_query_repo: IExhibitionQueryRepo,
    ) -> None:
        self.exhibition_command_repo = exhibition_command_repo
        self.exhibition_query_repo = exhibition_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        exhibition_command_repo: IExhibitionCommandRepo = Depends(
            Provide[Container.exhibition_command_repo]
        ),
        exhibition_query_repo: IExhibitionQueryRepo = Depends(
            Provide[Container.exhibition_query_repo]
        ),
    ) -> Self:
        return cls(
            exhibition_command_repo=exhibition_command_repo,
            exhibition_query_repo=exhibition_query_repo,
        )

    @Logger.io
    async def execute(
        self,
        *,
        exhibition_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        price: Optional[float] = None,
        image_url: Optional[str] = None,
        status: Optional[ExhibitionStatus] = None,
    ) -> Exhibition:
        exhibition = await self.exhibition_query_repo.get_by_id(exhibition_id=exhibition_id)
        if not exhibition:
            raise NotFoundError('Exhibition not found')

        updated = exhibition.update(
            name=name,
            description=description,
            start_date=start_date,
            end_date=end_date,
            price=price,
            image_url=image_url,
            status=status,
        )
        saved = await self.exhibition_command_repo.update(updated)
        Logger.base.info(f'✏️ [UPDATE_EXHIBITION] Exhibition {exhibition_id} updated')
        return saved
