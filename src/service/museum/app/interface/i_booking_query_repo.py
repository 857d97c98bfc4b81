from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.museum.app.dto.booking_dto import (
    BookingWithOwner,
    ExhibitionPopularity,
    RevenueSummary,
)
from src.service.museum.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: int) -> List[Booking]:
        """A user's bookings, newest first."""

    @abstractmethod
    async def list_with_owner(self, *, limit: Optional[int] = None) -> List[BookingWithOwner]:
        """Every booking with its owner's name, newest first."""

    @abstractmethod
    async def get_revenue_summary(self) -> RevenueSummary:
        pass

    @abstractmethod
    async def get_popular_exhibitions(self, *, limit: int) -> List[ExhibitionPopularity]:
        pass
