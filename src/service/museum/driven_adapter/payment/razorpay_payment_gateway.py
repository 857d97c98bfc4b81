"""
Razorpay checkout

Orders are opened server-side; the checkout widget returns
(order_id, payment_id, signature), and the signature is an HMAC-SHA256 of
"order_id|payment_id" keyed with the account secret.
The razorpay client is synchronous, so calls run in a worker thread.
"""

from typing import Optional

import anyio
import razorpay
from razorpay.errors import BadRequestError, ServerError, SignatureVerificationError

from src.platform.config.core_setting import Settings, settings
from src.platform.exception.exceptions import PaymentGatewayError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.dto.payment_dto import PaymentOrder, to_minor_units
from src.service.museum.app.interface.i_payment_gateway import IPaymentGateway


class RazorpayPaymentGateway(IPaymentGateway):
    def __init__(self, config: Optional[Settings] = None) -> None:
        config = config or settings
        self.key_id = config.RAZORPAY_KEY_ID or ''
        self._key_secret = (
            config.RAZORPAY_KEY_SECRET.get_secret_value() if config.RAZORPAY_KEY_SECRET else ''
        )
        self._client: Optional[razorpay.Client] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.key_id and self._key_secret)

    @property
    def client(self) -> razorpay.Client:
        if not self.is_configured:
            raise PaymentGatewayError('Payment gateway is not configured')
        if self._client is None:
            self._client = razorpay.Client(auth=(self.key_id, self._key_secret))
        return self._client

    @Logger.io
    async def create_order(self, *, amount: float, currency: str, receipt: str) -> PaymentOrder:
        order_data = {
            'amount': to_minor_units(amount),
            'currency': currency,
            'receipt': receipt,
            'payment_capture': 1,
        }
        client = self.client
        try:
            order = await anyio.to_thread.run_sync(client.order.create, order_data)
        except (BadRequestError, ServerError) as e:
            raise PaymentGatewayError(f'Could not create payment order: {e}') from e

        return PaymentOrder(
            order_id=order['id'],
            amount=order['amount'],
            currency=order['currency'],
            key_id=self.key_id,
        )

    @Logger.io
    async def fetch_order(self, *, order_id: str) -> PaymentOrder:
        client = self.client
        try:
            order = await anyio.to_thread.run_sync(client.order.fetch, order_id)
        except (BadRequestError, ServerError) as e:
            raise PaymentGatewayError(f'Could not fetch payment order {order_id}: {e}') from e

        return PaymentOrder(
            order_id=order['id'],
            amount=order['amount'],
            currency=order['currency'],
            key_id=self.key_id,
        )

    @Logger.io
    async def verify_payment(self, *, order_id: str, payment_id: str, signature: str) -> bool:
        client = self.client
        params = {
            'razorpay_order_id': order_id,
            'razorpay_payment_id': payment_id,
            'razorpay_signature': signature,
        }
        try:
            await anyio.to_thread.run_sync(client.utility.verify_payment_signature, params)
        except SignatureVerificationError:
            Logger.base.warning(f'⚠️ [PAYMENT] Signature mismatch for order {order_id}')
            return False
        return True
