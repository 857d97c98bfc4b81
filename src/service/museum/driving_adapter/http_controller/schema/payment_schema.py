from typing import Optional

from pydantic import ConfigDict, Field

from src.service.museum.app.dto.payment_dto import PaymentOrder
from src.service.museum.driving_adapter.http_controller.schema.camel_schema import CamelModel


class PaymentOrderRequest(CamelModel):
    amount: float = Field(allow_inf_nan=False)
    currency: Optional[str] = None

    model_config = ConfigDict(json_schema_extra={'example': {'amount': 70, 'currency': 'USD'}})


class PaymentOrderResponse(CamelModel):
    order_id: str
    amount: int  # smallest currency unit
    currency: str
    key_id: str

    @classmethod
    def from_dto(cls, order: PaymentOrder) -> 'PaymentOrderResponse':
        return cls(
            order_id=order.order_id,
            amount=order.amount,
            currency=order.currency,
            key_id=order.key_id,
        )
