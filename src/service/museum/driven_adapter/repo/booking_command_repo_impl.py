from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.museum.domain.entity.booking_entity import Booking
from src.service.museum.driven_adapter.model.booking_line_item_model import BookingLineItemModel
from src.service.museum.driven_adapter.model.booking_model import BookingModel
from src.service.museum.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        async with self.session_factory() as session:
            db_booking = BookingModel(
                user_id=booking.user_id,
                visit_date=booking.visit_date,
                total_price=booking.total_price,
                status=booking.status.value,
                payment_id=booking.payment_id,
                contact_email=booking.contact_email,
                line_items=[
                    BookingLineItemModel(
                        ticket_id=item.ticket_id,
                        name=item.name,
                        price=item.price,
                        quantity=item.quantity,
                        is_exhibition=item.is_exhibition,
                    )
                    for item in booking.line_items
                ],
            )
            if booking.created_at is not None:
                db_booking.created_at = booking.created_at

            session.add(db_booking)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if booking.payment_id is None:
                    raise
                raise DomainError('Payment has already been used for another booking') from e
            await session.refresh(db_booking)

            return BookingQueryRepoImpl._to_entity(db_booking)

    @Logger.io
    async def update_status(self, *, booking: Booking) -> Booking:
        async with self.session_factory() as session:
            db_booking = await session.get(BookingModel, booking.id)
            if not db_booking:
                raise NotFoundError('Booking not found')

            db_booking.status = booking.status.value
            db_booking.cancelled_at = booking.cancelled_at
            await session.commit()

            return BookingQueryRepoImpl._to_entity(db_booking)
