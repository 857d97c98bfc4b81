from typing import List

from src.service.museum.app.dto.booking_dto import (
    AnalyticsReport,
    BookingWithOwner,
    ExhibitionPopularity,
)
from src.service.museum.driving_adapter.http_controller.schema.booking_schema import (
    BookingResponse,
)
from src.service.museum.driving_adapter.http_controller.schema.camel_schema import CamelModel
from src.service.museum.driving_adapter.http_controller.schema.user_schema import UserResponse


class MessageResponse(CamelModel):
    message: str


class UserListResponse(CamelModel):
    users: List[UserResponse]


class TransactionResponse(BookingResponse):
    user_name: str
    user_email: str

    @classmethod
    def from_dto(cls, row: BookingWithOwner) -> 'TransactionResponse':
        booking = BookingResponse.from_entity(row.booking)
        return cls(**booking.model_dump(), user_name=row.user_name, user_email=row.user_email)


class TransactionListResponse(CamelModel):
    transactions: List[TransactionResponse]


class PopularExhibitionResponse(CamelModel):
    name: str
    ticket_count: int
    revenue: float

    @classmethod
    def from_dto(cls, row: ExhibitionPopularity) -> 'PopularExhibitionResponse':
        return cls(name=row.name, ticket_count=row.ticket_count, revenue=row.revenue)


class AnalyticsResponse(CamelModel):
    total_users: int
    total_transactions: int
    total_revenue: float
    active_exhibitions: int
    recent_transactions: List[TransactionResponse]
    popular_exhibitions: List[PopularExhibitionResponse]

    @classmethod
    def from_report(cls, report: AnalyticsReport) -> 'AnalyticsResponse':
        return cls(
            total_users=report.total_users,
            total_transactions=report.total_transactions,
            total_revenue=report.total_revenue,
            active_exhibitions=report.active_exhibitions,
            recent_transactions=[
                TransactionResponse.from_dto(row) for row in report.recent_transactions
            ],
            popular_exhibitions=[
                PopularExhibitionResponse.from_dto(row) for row in report.popular_exhibitions
            ],
        )
