from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.museum.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.museum.app.command.update_booking_status_to_cancelled_use_case import (
    UpdateBookingToCancelledUseCase,
)
from src.service.museum.app.dto.booking_dto import BookingLineRequest
from src.service.museum.app.dto.payment_dto import PaymentProof
from src.service.museum.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.museum.domain.entity.user_entity import UserEntity
from src.service.museum.driving_adapter.http_controller.auth.role_auth import get_current_user
from src.service.museum.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingEnvelopeResponse,
    BookingListResponse,
    BookingResponse,
)


router = APIRouter()


@router.post('', response_model=BookingEnvelopeResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingEnvelopeResponse:
    payment_proof = None
    if request.razorpay_order_id and request.razorpay_signature:
        payment_proof = PaymentProof(
            payment_id=request.payment_id or '',
            order_id=request.razorpay_order_id,
            signature=request.razorpay_signature,
        )

    booking = await use_case.execute(
        user_id=current_user.id or 0,
        visit_date=request.visit_date,
        tickets=[
            BookingLineRequest(
                ticket_id=line.ticket_id,
                quantity=line.quantity,
                is_exhibition=line.is_exhibition,
            )
            for line in request.tickets
        ],
        expected_total=request.total_price,
        contact_email=request.email,
        payment_id=request.payment_id,
        payment_proof=payment_proof,
    )

    return BookingEnvelopeResponse(
        message='Tickets booked successfully',
        ticket=BookingResponse.from_entity(booking),
    )


@router.get('', response_model=BookingListResponse)
@Logger.io
async def list_my_bookings(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> BookingListResponse:
    bookings = await use_case.list_by_user(user_id=current_user.id or 0)
    return BookingListResponse(tickets=[BookingResponse.from_entity(b) for b in bookings])


@router.put('/{booking_id}/cancel', response_model=BookingEnvelopeResponse)
@Logger.io
async def cancel_booking(
    booking_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UpdateBookingToCancelledUseCase = Depends(UpdateBookingToCancelledUseCase.depends),
) -> BookingEnvelopeResponse:
    booking = await use_case.execute(booking_id=booking_id, user_id=current_user.id or 0)
    return BookingEnvelopeResponse(
        message='Booking cancelled successfully',
        ticket=BookingResponse.from_entity(booking),
    )
