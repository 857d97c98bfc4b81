from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.dto.booking_dto import AnalyticsReport
from src.service.museum.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.museum.app.interface.i_exhibition_query_repo import IExhibitionQueryRepo
from src.service.museum.app.interface.i_user_query_repo import IUserQueryRepo


RECENT_TRANSACTIONS_LIMIT = 5
POPULAR_EXHIBITIONS_LIMIT = 5


class GetAnalyticsUseCase:
    def __init__(
        self,
        *,
        user_query_repo: IUserQueryRepo,
        booking_query_repo: IBookingQueryRepo,
        exhibition_query_repo: IExhibitionQueryRepo,
    ) -> None:
        self.user_query_repo = user_query_repo
        self.booking_query_repo = booking_query_repo
        self.exhibition_query_repo = exhibition_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        exhibition_query_repo: IExhibitionQueryRepo = Depends(
            Provide[Container.exhibition_query_repo]
        ),
    ) -> Self:
        return cls(
            user_query_repo=user_query_repo,
            booking_query_repo=booking_query_repo,
            exhibition_query_repo=exhibition_query_repo,
        )

    @Logger.io
    async def execute(self) -> AnalyticsReport:
        """Dashboard totals; revenue and popularity count confirmed bookings only."""
        revenue = await self.booking_query_repo.get_revenue_summary()
        report = AnalyticsReport(
            total_users=await self.user_query_repo.count(),
            total_transactions=revenue.total_transactions,
            total_revenue=revenue.total_revenue,
            active_exhibitions=await self.exhibition_query_repo.count_active(),
            recent_transactions=await self.booking_query_repo.list_with_owner(
                limit=RECENT_TRANSACTIONS_LIMIT
            ),
            popular_exhibitions=await self.booking_query_repo.get_popular_exhibitions(
                limit=POPULAR_EXHIBITIONS_LIMIT
            ),
        )
        Logger.base.info(
            f'📊 [ANALYTICS] {report.total_transactions} transactions, '
            f'${report.total_revenue:.2f} revenue'
        )
        return report
