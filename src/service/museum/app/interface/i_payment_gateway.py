from abc import ABC, abstractmethod

from src.service.museum.app.dto.payment_dto import PaymentOrder


class IPaymentGateway(ABC):
    @property
    @abstractmethod
    def is_configured(self) -> bool:
        pass

    @abstractmethod
    async def create_order(self, *, amount: float, currency: str, receipt: str) -> PaymentOrder:
        """Open a checkout order; ``amount`` is in major units (dollars)."""

    @abstractmethod
    async def verify_payment(self, *, order_id: str, payment_id: str, signature: str) -> bool:
        pass

    @abstractmethod
    async def fetch_order(self, *, order_id: str) -> PaymentOrder:
        """Look up an order opened earlier; ``amount`` comes back in the smallest currency unit."""
