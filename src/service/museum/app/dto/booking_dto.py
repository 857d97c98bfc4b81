"""Read models returned by booking queries."""

from typing import List

import attrs

from src.service.museum.domain.entity.booking_entity import Booking


@attrs.define(frozen=True)
class BookingWithOwner:
    booking: Booking
    user_name: str
    user_email: str


@attrs.define(frozen=True)
class RevenueSummary:
    total_transactions: int
    total_revenue: float


@attrs.define(frozen=True)
class ExhibitionPopularity:
    name: str
    ticket_count: int
    revenue: float


@attrs.define(frozen=True)
class AnalyticsReport:
    total_users: int
    total_transactions: int
    total_revenue: float
    active_exhibitions: int
    recent_transactions: List[BookingWithOwner]
    popular_exhibitions: List[ExhibitionPopularity]


@attrs.define(frozen=True)
class BookingLineRequest:
    """A ticket line as submitted by the client; prices and names are looked up server-side."""

    ticket_id: str
    quantity: int
    is_exhibition: bool = False
