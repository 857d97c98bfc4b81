from datetime import date
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.museum.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.museum.domain.entity.booking_entity import Booking


class UpdateBookingToCancelledUseCase:
    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        booking_query_repo: IBookingQueryRepo,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_command_repo=booking_command_repo, booking_query_repo=booking_query_repo)

    @Logger.io
    async def execute(
        self, *, booking_id: int, user_id: int, today: Optional[date] = None
    ) -> Booking:
        booking = await self.booking_query_repo.get_by_id(booking_id=booking_id)
        if not booking:
            raise NotFoundError('Booking not found')

        booking.validate_owner(user_id)
        cancelled = booking.cancel(today=today or date.today())

        updated = await self.booking_command_repo.update_status(booking=cancelled)
        Logger.base.info(f'🚫 [CANCEL] Booking {booking_id} cancelled by user {user_id}')
        return updated
