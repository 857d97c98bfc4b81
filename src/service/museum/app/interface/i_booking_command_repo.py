from abc import ABC, abstractmethod

from src.service.museum.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def update_status(self, *, booking: Booking) -> Booking:
        pass
