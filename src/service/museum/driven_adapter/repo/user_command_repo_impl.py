from typing import AsyncContextManager, Callable

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.museum.domain.entity.user_entity import UserEntity
from src.service.museum.driven_adapter.model.booking_line_item_model import BookingLineItemModel
from src.service.museum.driven_adapter.model.booking_model import BookingModel
from src.service.museum.driven_adapter.model.user_model import UserModel
from src.service.museum.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
                name=user_entity.name,
                role=user_entity.role.value,
            )

            session.add(user_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise DomainError('User already exists') from e
            await session.refresh(user_model)

            return UserQueryRepoImpl._model_to_entity(user_model)

    @Logger.io
    async def delete(self, *, user_id: int) -> bool:
        async with self.session_factory() as session:
            # Explicit child deletes; SQLite does not enforce ON DELETE CASCADE by default
            booking_ids = select(BookingModel.id).where(BookingModel.user_id == user_id)
            await session.execute(
                delete(BookingLineItemModel).where(BookingLineItemModel.booking_id.in_(booking_ids))
            )
            await session.execute(delete(BookingModel).where(BookingModel.user_id == user_id))
            result = await session.execute(delete(UserModel).where(UserModel.id == user_id))
            await session.commit()

            return result.rowcount > 0  # type: ignore[attr-defined]
