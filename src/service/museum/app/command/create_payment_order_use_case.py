import math
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, PaymentGatewayError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.dto.payment_dto import PaymentOrder
from src.service.museum.app.interface.i_payment_gateway import IPaymentGateway


class CreatePaymentOrderUseCase:
    def __init__(self, *, payment_gateway: IPaymentGateway) -> None:
        self.payment_gateway = payment_gateway

    @classmethod
    @inject
    def depends(
        cls,
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
    ) -> Self:
        return cls(payment_gateway=payment_gateway)

    @Logger.io
    async def execute(
        self, *, user_id: int, amount: float, currency: Optional[str] = None
    ) -> PaymentOrder:
        if not math.isfinite(amount) or amount <= 0:
            raise DomainError('Amount must be greater than zero')
        if not self.payment_gateway.is_configured:
            raise PaymentGatewayError('Payment gateway is not configured')

        order = await self.payment_gateway.create_order(
            amount=amount,
            currency=(currency or settings.PAYMENT_CURRENCY).upper(),
            receipt=f'user_{user_id}',
        )
        Logger.base.info(f'💳 [PAYMENT] Order {order.order_id} opened for user {user_id}')
        return order
