from datetime import date, datetime, timezone
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import DomainError, ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.museum.domain.entity.user_entity import EMAIL_PATTERN
from src.service.museum.domain.enum.booking_status import BookingStatus


CLOSED_WEEKDAY = 0  # Monday
MAX_TICKET_QUANTITY = 100  # per line
MAX_BOOKING_TOTAL = 99_999_999.99  # fits Numeric(10, 2)


def validate_quantity(quantity: int) -> None:
    if quantity < 1:
        raise DomainError('Ticket quantity must be at least 1')
    if quantity > MAX_TICKET_QUANTITY:
        raise DomainError(f'Ticket quantity cannot be more than {MAX_TICKET_QUANTITY}')


def _validate_quantity(instance: object, attribute: attrs.Attribute, value: int) -> None:
    validate_quantity(value)


def validate_contact_email(contact_email: Optional[str]) -> None:
    if contact_email and not EMAIL_PATTERN.match(contact_email):
        raise DomainError('Please provide a valid email')


@attrs.define
class BookingLineItem:
    ticket_id: str
    name: str
    price: float = attrs.field(converter=float)
    quantity: int = attrs.field(validator=_validate_quantity)
    is_exhibition: bool = False

    @property
    def subtotal(self) -> float:
        return round(self.price * self.quantity, 2)


def calculate_total(line_items: List[BookingLineItem]) -> float:
    return round(sum(item.subtotal for item in line_items), 2)


def validate_visit_date(visit_date: date, *, today: date) -> None:
    if visit_date < today:
        raise DomainError('Visit date cannot be in the past')
    if visit_date.weekday() == CLOSED_WEEKDAY:
        raise DomainError('The museum is closed on Mondays')


@attrs.define
class Booking:
    user_id: int
    visit_date: date
    line_items: List[BookingLineItem] = attrs.field(factory=list)
    total_price: float = 0.0
    status: BookingStatus = BookingStatus.CONFIRMED
    payment_id: Optional[str] = None
    contact_email: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None

    @property
    def general_items(self) -> List[BookingLineItem]:
        return [item for item in self.line_items if not item.is_exhibition]

    @property
    def exhibition_items(self) -> List[BookingLineItem]:
        return [item for item in self.line_items if item.is_exhibition]

    @property
    def ticket_count(self) -> int:
        return sum(item.quantity for item in self.line_items)

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_id: int,
        visit_date: date,
        line_items: List[BookingLineItem],
        today: date,
        payment_id: Optional[str] = None,
        contact_email: Optional[str] = None,
    ) -> 'Booking':
        """
        Build a confirmed booking after checking the rules that need no lookups.

        Raises:
            DomainError: empty order, bad visit date, missing ticket kind, bad e-mail
                or a total too large to store
        """
        if not line_items:
            raise DomainError('At least one ticket is required')

        validate_visit_date(visit_date, today=today)

        if not any(not item.is_exhibition for item in line_items):
            raise DomainError('At least one general admission ticket is required')
        if not any(item.is_exhibition for item in line_items):
            raise DomainError('At least one exhibition ticket is required')
        validate_contact_email(contact_email)

        total_price = calculate_total(line_items)
        if total_price > MAX_BOOKING_TOTAL:
            raise DomainError('Booking total is too large')

        return cls(
            user_id=user_id,
            visit_date=visit_date,
            line_items=line_items,
            total_price=total_price,
            status=BookingStatus.CONFIRMED,
            payment_id=payment_id,
            contact_email=contact_email,
            created_at=datetime.now(timezone.utc),
        )

    def validate_owner(self, user_id: int) -> None:
        if self.user_id != user_id:
            raise ForbiddenError('Only the ticket holder can cancel this booking')

    @Logger.io
    def cancel(self, *, today: date) -> 'Booking':
        """
        Cancel a confirmed booking whose visit has not happened yet

        Raises:
            DomainError: already cancelled, or the visit date has passed
        """
        if self.status == BookingStatus.CANCELLED:
            raise DomainError('Booking already cancelled')
        if self.visit_date < today:
            raise DomainError('Cannot cancel a booking for a past visit')

        return attrs.evolve(
            self, status=BookingStatus.CANCELLED, cancelled_at=datetime.now(timezone.utc)
        )
