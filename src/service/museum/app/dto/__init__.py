"""Application layer DTOs"""

from src.service.museum.app.dto.booking_dto import (
    AnalyticsReport,
    BookingLineRequest,
    BookingWithOwner,
    ExhibitionPopularity,
    RevenueSummary,
)
from src.service.museum.app.dto.payment_dto import PaymentOrder, PaymentProof

__all__ = [
    'AnalyticsReport',
    'BookingLineRequest',
    'BookingWithOwner',
    'ExhibitionPopularity',
    'PaymentOrder',
    'PaymentProof',
    'RevenueSummary',
]
