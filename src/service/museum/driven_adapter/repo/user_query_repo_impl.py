from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.museum.domain.entity.user_entity import UserEntity, UserRole
from src.service.museum.driven_adapter.model.user_model import UserModel


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.email == email))
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return self._model_to_entity(user_model)

    @Logger.io
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            user_model = await session.get(UserModel, user_id)

            if not user_model:
                return None

            return self._model_to_entity(user_model)

    @Logger.io
    async def exists_by_email(self, email: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel.id).where(UserModel.email == email))
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def list_all(self) -> List[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).order_by(UserModel.created_at.desc(), UserModel.id.desc())
            )
            return [self._model_to_entity(user_model) for user_model in result.scalars()]

    @Logger.io
    async def count(self) -> int:
        async with self.session_factory() as session:
            result = await session.execute(select(func.count(UserModel.id)))
            return result.scalar_one()

    @staticmethod
    def _model_to_entity(user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            email=user_model.email,
            name=user_model.name,
            hashed_password=user_model.hashed_password,
            role=UserRole(user_model.role),
            created_at=user_model.created_at,
        )
