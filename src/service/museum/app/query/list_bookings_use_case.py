from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.dto.booking_dto import BookingWithOwner
from src.service.museum.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.museum.domain.entity.booking_entity import Booking


class ListBookingsUseCase:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def list_by_user(self, *, user_id: int) -> List[Booking]:
        bookings = await self.booking_query_repo.list_by_user(user_id=user_id)
        Logger.base.info(f'📋 [LIST_BY_USER] Found {len(bookings)} bookings for user {user_id}')
        return bookings

    @Logger.io
    async def list_transactions(self) -> List[BookingWithOwner]:
        transactions = await self.booking_query_repo.list_with_owner()
        Logger.base.info(f'📋 [LIST_TRANSACTIONS] Found {len(transactions)} transactions')
        return transactions
