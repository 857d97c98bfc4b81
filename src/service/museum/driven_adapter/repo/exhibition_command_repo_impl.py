from typing import AsyncContextManager, Callable

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_exhibition_command_repo import IExhibitionCommandRepo
from src.service.museum.domain.entity.exhibition_entity import Exhibition
from src.service.museum.driven_adapter.model.exhibition_model import ExhibitionModel
from src.service.museum.driven_adapter.repo.exhibition_query_repo_impl import (
    ExhibitionQueryRepoImpl,
)


class ExhibitionCommandRepoImpl(IExhibitionCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, exhibition: Exhibition) -> Exhibition:
        async with self.session_factory() as session:
            exhibition_model = ExhibitionModel(
                name=exhibition.name,
                description=exhibition.description,
                start_date=exhibition.start_date,
                end_date=exhibition.end_date,
                price=exhibition.price,
                image_url=exhibition.image_url,
                status=exhibition.status.value,
            )
            session.add(exhibition_model)
            await session.commit()
            await session.refresh(exhibition_model)

            return ExhibitionQueryRepoImpl._to_entity(exhibition_model)

    @Logger.io
    async def update(self, exhibition: Exhibition) -> Exhibition:
        async with self.session_factory() as session:
            exhibition_model = await session.get(ExhibitionModel, exhibition.id)
            if not exhibition_model:
                raise NotFoundError('Exhibition not found')

            exhibition_model.name = exhibition.name
            exhibition_model.description = exhibition.description
            exhibition_model.start_date = exhibition.start_date
            exhibition_model.end_date = exhibition.end_date
            exhibition_model.price = exhibition.price
            exhibition_model.image_url = exhibition.image_url
            exhibition_model.status = exhibition.status.value

            await session.commit()
            await session.refresh(exhibition_model)

            return ExhibitionQueryRepoImpl._to_entity(exhibition_model)

    @Logger.io
    async def delete(self, *, exhibition_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(ExhibitionModel).where(ExhibitionModel.id == exhibition_id)
            )
            await session.commit()
            return result.rowcount > 0  # type: ignore[attr-defined]
