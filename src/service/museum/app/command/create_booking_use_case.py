from datetime import date
from typing import Dict, List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.dto.booking_dto import BookingLineRequest
from src.service.museum.app.dto.payment_dto import PaymentProof, to_minor_units
from src.service.museum.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.museum.app.interface.i_exhibition_query_repo import IExhibitionQueryRepo
from src.service.museum.app.interface.i_payment_gateway import IPaymentGateway
from src.service.museum.domain.entity.booking_entity import (
    Booking,
    BookingLineItem,
    validate_quantity,
    validate_visit_date,
)
from src.service.museum.domain.value_object.ticket_type import TicketType, find_general_admission


class CreateBookingUseCase:
    """
    Book general admission and exhibition tickets for one visit day.

    Unit prices and names always come from the catalog and the exhibition
    rows; whatever the client sent for them is ignored. A client total, when
    given, must agree with the computed one.
    """

    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        exhibition_query_repo: IExhibitionQueryRepo,
        payment_gateway: IPaymentGateway,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.exhibition_query_repo = exhibition_query_repo
        self.payment_gateway = payment_gateway

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        exhibition_query_repo: IExhibitionQueryRepo = Depends(
            Provide[Container.exhibition_query_repo]
        ),
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            exhibition_query_repo=exhibition_query_repo,
            payment_gateway=payment_gateway,
        )

    @Logger.io
    async def execute(
        self,
        *,
        user_id: int,
        visit_date: date,
        tickets: List[BookingLineRequest],
        expected_total: Optional[float] = None,
        contact_email: Optional[str] = None,
        payment_id: Optional[str] = None,
        payment_proof: Optional[PaymentProof] = None,
        today: Optional[date] = None,
    ) -> Booking:
        today = today or date.today()

        if not tickets:
            raise DomainError('At least one ticket is required')
        for ticket in tickets:
            validate_quantity(ticket.quantity)
        validate_visit_date(visit_date, today=today)
        if all(ticket.is_exhibition for ticket in tickets):
            raise DomainError('At least one general admission ticket is required')
        if not any(ticket.is_exhibition for ticket in tickets):
            raise DomainError('At least one exhibition ticket is required')

        line_items = await self._price_line_items(tickets=tickets, visit_date=visit_date)
        booking = Booking.create(
            user_id=user_id,
            visit_date=visit_date,
            line_items=line_items,
            today=today,
            payment_id=(payment_proof.payment_id if payment_proof else payment_id) or None,
            contact_email=contact_email,
        )

        if expected_total is not None and round(expected_total, 2) != booking.total_price:
            raise DomainError(
                f'Total price mismatch: expected {booking.total_price:.2f}, got {expected_total:.2f}'
            )

        if payment_proof is not None:
            await self._verify_payment(payment_proof=payment_proof, total_price=booking.total_price)

        created = await self.booking_command_repo.create(booking=booking)
        Logger.base.info(
            f'🎟️ [CREATE_BOOKING] Booking {created.id} for user {user_id} on '
            f'{visit_date.isoformat()}: {created.ticket_count} tickets, ${created.total_price:.2f}'
        )
        return created

    async def _price_line_items(
        self, *, tickets: List[BookingLineRequest], visit_date: date
    ) -> List[BookingLineItem]:
        # Every general admission id is checked before any exhibition is looked up
        ticket_types: Dict[str, TicketType] = {}
        for ticket in tickets:
            if ticket.is_exhibition:
                continue
            ticket_type = find_general_admission(ticket.ticket_id)
            if ticket_type is None:
                raise DomainError(f'Unknown ticket type: {ticket.ticket_id}')
            ticket_types[ticket.ticket_id] = ticket_type

        exhibition_ids = {
            self._parse_exhibition_id(ticket.ticket_id) for ticket in tickets if ticket.is_exhibition
        }
        exhibitions = await self.exhibition_query_repo.get_by_ids(exhibition_ids=exhibition_ids)

        line_items: List[BookingLineItem] = []
        for ticket in tickets:
            if ticket.is_exhibition:
                exhibition = exhibitions.get(self._parse_exhibition_id(ticket.ticket_id))
                if exhibition is None:
                    raise NotFoundError(f'Exhibition {ticket.ticket_id} not found')
                exhibition.validate_bookable_on(visit_date)
                line_items.append(
                    BookingLineItem(
                        ticket_id=str(exhibition.id),
                        name=exhibition.name,
                        price=exhibition.price,
                        quantity=ticket.quantity,
                        is_exhibition=True,
                    )
                )
            else:
                ticket_type = ticket_types[ticket.ticket_id]
                line_items.append(
                    BookingLineItem(
                        ticket_id=ticket_type.id,
                        name=ticket_type.name,
                        price=ticket_type.price,
                        quantity=ticket.quantity,
                    )
                )
        return line_items

    async def _verify_payment(self, *, payment_proof: PaymentProof, total_price: float) -> None:
        """The signature must be genuine and the paid order must cover exactly this booking."""
        verified = await self.payment_gateway.verify_payment(
            order_id=payment_proof.order_id,
            payment_id=payment_proof.payment_id,
            signature=payment_proof.signature,
        )
        if not verified:
            raise DomainError('Payment verification failed')

        order = await self.payment_gateway.fetch_order(order_id=payment_proof.order_id)
        if order.amount != to_minor_units(total_price):
            Logger.base.warning(
                f'⚠️ [CREATE_BOOKING] Order {order.order_id} paid {order.amount}, '
                f'booking needs {to_minor_units(total_price)}'
            )
            raise DomainError('Payment amount does not match the booking total')

    @staticmethod
    def _parse_exhibition_id(ticket_id: str) -> int:
        try:
            return int(ticket_id)
        except ValueError:
            raise NotFoundError(f'Exhibition {ticket_id} not found')
