from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.museum.app.command.create_payment_order_use_case import (
    CreatePaymentOrderUseCase,
)
from src.service.museum.domain.entity.user_entity import UserEntity
from src.service.museum.driving_adapter.http_controller.auth.role_auth import get_current_user
from src.service.museum.driving_adapter.http_controller.schema.payment_schema import (
    PaymentOrderRequest,
    PaymentOrderResponse,
)


router = APIRouter()


@router.post('/order', response_model=PaymentOrderResponse)
@Logger.io
async def create_payment_order(
    request: PaymentOrderRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreatePaymentOrderUseCase = Depends(CreatePaymentOrderUseCase.depends),
) -> PaymentOrderResponse:
    order = await use_case.execute(
        user_id=current_user.id or 0,
        amount=request.amount,
        currency=request.currency,
    )
    return PaymentOrderResponse.from_dto(order)
