from datetime import date
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_exhibition_query_repo import IExhibitionQueryRepo
from src.service.museum.domain.entity.exhibition_entity import Exhibition
from src.service.museum.domain.enum.exhibition_status import ExhibitionCategory
from src.service.museum.domain.value_object.ticket_type import GENERAL_ADMISSION, TicketType


class ListExhibitionsUseCase:
    def __init__(self, *, exhibition_query_repo: IExhibitionQueryRepo) -> None:
        self.exhibition_query_repo = exhibition_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        exhibition_query_repo: IExhibitionQueryRepo = Depends(
            Provide[Container.exhibition_query_repo]
        ),
    ) -> Self:
        return cls(exhibition_query_repo=exhibition_query_repo)

    @Logger.io
    async def list_all(
        self, *, category: Optional[ExhibitionCategory] = None, today: Optional[date] = None
    ) -> List[Exhibition]:
        exhibitions = await self.exhibition_query_repo.list_all()
        if category is None:
            return exhibitions

        today = today or date.today()
        return [e for e in exhibitions if e.category_on(today) == category]

    @Logger.io
    async def get(self, *, exhibition_id: int) -> Exhibition:
        exhibition = await self.exhibition_query_repo.get_by_id(exhibition_id=exhibition_id)
        if not exhibition:
            raise NotFoundError('Exhibition not found')
        return exhibition

    @Logger.io
    async def is_available(self, *, exhibition_id: int, visit_date: date) -> bool:
        exhibition = await self.get(exhibition_id=exhibition_id)
        return exhibition.is_available_on(visit_date)

    @Logger.io
    async def list_ticket_types(self) -> List[TicketType]:
        """General admission tiers followed by one ticket type per exhibition."""
        exhibitions = await self.exhibition_query_repo.list_all()
        return list(GENERAL_ADMISSION) + [
            TicketType(
                id=str(exhibition.id),
                name=exhibition.name,
                price=exhibition.price,
                description=exhibition.description,
                is_exhibition=True,
                available=exhibition.is_active,
                start_date=exhibition.start_date,
                end_date=exhibition.end_date,
            )
            for exhibition in exhibitions
        ]
