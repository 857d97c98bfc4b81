from typing import AsyncContextManager, Callable, Dict, Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_exhibition_query_repo import IExhibitionQueryRepo
from src.service.museum.domain.entity.exhibition_entity import Exhibition
from src.service.museum.domain.enum.exhibition_status import ExhibitionStatus
from src.service.museum.driven_adapter.model.exhibition_model import ExhibitionModel


class ExhibitionQueryRepoImpl(IExhibitionQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(exhibition_model: ExhibitionModel) -> Exhibition:
        return Exhibition(
            id=exhibition_model.id,
            name=exhibition_model.name,
            description=exhibition_model.description,
            start_date=exhibition_model.start_date,
            end_date=exhibition_model.end_date,
            price=exhibition_model.price,
            image_url=exhibition_model.image_url or '',
            status=ExhibitionStatus(exhibition_model.status),
            created_at=exhibition_model.created_at,
            updated_at=exhibition_model.updated_at,
        )

    @Logger.io
    async def get_by_id(self, *, exhibition_id: int) -> Optional[Exhibition]:
        async with self.session_factory() as session:
            exhibition_model = await session.get(ExhibitionModel, exhibition_id)
            if not exhibition_model:
                return None
            return self._to_entity(exhibition_model)

    @Logger.io
    async def get_by_ids(self, *, exhibition_ids: Iterable[int]) -> Dict[int, Exhibition]:
        ids = list(exhibition_ids)
        if not ids:
            return {}

        async with self.session_factory() as session:
            result = await session.execute(
                select(ExhibitionModel).where(ExhibitionModel.id.in_(ids))
            )
            return {model.id: self._to_entity(model) for model in result.scalars()}

    @Logger.io
    async def list_all(self) -> List[Exhibition]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ExhibitionModel).order_by(
                    ExhibitionModel.start_date, ExhibitionModel.id
                )
            )
            return [self._to_entity(model) for model in result.scalars()]

    @Logger.io
    async def count_active(self) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                select(func.count(ExhibitionModel.id)).where(
                    ExhibitionModel.status == ExhibitionStatus.ACTIVE.value
                )
            )
            return result.scalar_one()
