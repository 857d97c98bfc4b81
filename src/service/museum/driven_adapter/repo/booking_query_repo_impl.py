from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.museum.app.dto.booking_dto import (
    BookingWithOwner,
    ExhibitionPopularity,
    RevenueSummary,
)
from src.service.museum.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.museum.domain.entity.booking_entity import Booking, BookingLineItem
from src.service.museum.domain.enum.booking_status import BookingStatus
from src.service.museum.driven_adapter.model.booking_line_item_model import BookingLineItemModel
from src.service.museum.driven_adapter.model.booking_model import BookingModel
from src.service.museum.driven_adapter.model.user_model import UserModel


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        """
        Convert BookingModel to Booking entity

        Note:
        - line_items are loaded with selectin, so they are available after the session closes
        """
        return Booking(
            id=db_booking.id,
            user_id=db_booking.user_id,
            visit_date=db_booking.visit_date,
            line_items=[
                BookingLineItem(
                    ticket_id=line.ticket_id,
                    name=line.name,
                    price=line.price,
                    quantity=line.quantity,
                    is_exhibition=line.is_exhibition,
                )
                for line in db_booking.line_items
            ],
            total_price=db_booking.total_price,
            status=BookingStatus(db_booking.status),
            payment_id=db_booking.payment_id,
            contact_email=db_booking.contact_email,
            created_at=db_booking.created_at,
            cancelled_at=db_booking.cancelled_at,
        )

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        async with self.session_factory() as session:
            db_booking = await session.get(BookingModel, booking_id)
            if not db_booking:
                return None
            return self._to_entity(db_booking)

    @Logger.io
    async def list_by_user(self, *, user_id: int) -> List[Booking]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.user_id == user_id)
                .order_by(BookingModel.created_at.desc(), BookingModel.id.desc())
            )
            return [self._to_entity(db_booking) for db_booking in result.scalars()]

    @Logger.io
    async def list_with_owner(self, *, limit: Optional[int] = None) -> List[BookingWithOwner]:
        async with self.session_factory() as session:
            stmt = (
                select(BookingModel, UserModel.name, UserModel.email)
                .join(UserModel, UserModel.id == BookingModel.user_id)
                .order_by(BookingModel.created_at.desc(), BookingModel.id.desc())
            )
            if limit is not None:
                stmt = stmt.limit(limit)

            result = await session.execute(stmt)
            return [
                BookingWithOwner(
                    booking=self._to_entity(db_booking),
                    user_name=user_name,
                    user_email=user_email,
                )
                for db_booking, user_name, user_email in result.all()
            ]

    @Logger.io
    async def get_revenue_summary(self) -> RevenueSummary:
        async with self.session_factory() as session:
            total_transactions = (
                await session.execute(select(func.count(BookingModel.id)))
            ).scalar_one()
            total_revenue = (
                await session.execute(
                    select(func.coalesce(func.sum(BookingModel.total_price), 0)).where(
                        BookingModel.status == BookingStatus.CONFIRMED.value
                    )
                )
            ).scalar_one()

            return RevenueSummary(
                total_transactions=total_transactions,
                total_revenue=round(float(total_revenue), 2),
            )

    @Logger.io
    async def get_popular_exhibitions(self, *, limit: int) -> List[ExhibitionPopularity]:
        ticket_count = func.sum(BookingLineItemModel.quantity)
        revenue = func.sum(BookingLineItemModel.price * BookingLineItemModel.quantity)

        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingLineItemModel.name, ticket_count, revenue)
                .join(BookingModel, BookingModel.id == BookingLineItemModel.booking_id)
                .where(
                    BookingLineItemModel.is_exhibition.is_(True),
                    BookingModel.status == BookingStatus.CONFIRMED.value,
                )
                .group_by(BookingLineItemModel.name)
                .order_by(ticket_count.desc(), BookingLineItemModel.name)
                .limit(limit)
            )
            return [
                ExhibitionPopularity(
                    name=name,
                    ticket_count=int(count or 0),
                    revenue=round(float(total or 0), 2),
                )
                for name, count, total in result.all()
            ]
