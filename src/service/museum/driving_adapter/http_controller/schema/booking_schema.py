from datetime import date, datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from src.service.museum.domain.entity.booking_entity import Booking, BookingLineItem
from src.service.museum.driving_adapter.http_controller.schema.camel_schema import CamelModel


class TicketLineRequest(CamelModel):
    ticket_id: str
    name: Optional[str] = None  # ignored, the server looks the name up
    price: Optional[float] = None  # ignored, the server looks the price up
    quantity: int
    is_exhibition: bool = False

    @field_validator('ticket_id', mode='before')
    @classmethod
    def coerce_ticket_id(cls, v: object) -> object:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class BookingCreateRequest(CamelModel):
    visit_date: date
    tickets: List[TicketLineRequest]
    total_price: Optional[float] = Field(default=None, allow_inf_nan=False)
    email: Optional[str] = None
    payment_id: Optional[str] = None
    razorpay_order_id: Optional[str] = None
    razorpay_signature: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'visitDate': '2026-11-03',
                'tickets': [
                    {'ticketId': 'adult', 'name': 'Adult', 'price': 20, 'quantity': 2},
                    {
                        'ticketId': '1',
                        'name': 'Impressionist Masters',
                        'price': 15,
                        'quantity': 2,
                        'isExhibition': True,
                    },
                ],
                'totalPrice': 70,
            }
        }
    )


class TicketLineResponse(CamelModel):
    ticket_id: str
    name: str
    price: float
    quantity: int
    is_exhibition: bool
    subtotal: float

    @classmethod
    def from_entity(cls, item: BookingLineItem) -> 'TicketLineResponse':
        return cls(
            ticket_id=item.ticket_id,
            name=item.name,
            price=item.price,
            quantity=item.quantity,
            is_exhibition=item.is_exhibition,
            subtotal=item.subtotal,
        )


class BookingResponse(CamelModel):
    id: int
    user_id: int
    visit_date: date
    tickets: List[TicketLineResponse]
    total_price: float
    status: str
    payment_id: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        return cls(
            id=booking.id or 0,
            user_id=booking.user_id,
            visit_date=booking.visit_date,
            tickets=[TicketLineResponse.from_entity(item) for item in booking.line_items],
            total_price=booking.total_price,
            status=booking.status.value,
            payment_id=booking.payment_id,
            email=booking.contact_email,
            created_at=booking.created_at,
            cancelled_at=booking.cancelled_at,
        )


class BookingEnvelopeResponse(CamelModel):
    message: str
    ticket: BookingResponse


class BookingListResponse(CamelModel):
    tickets: List[BookingResponse]
