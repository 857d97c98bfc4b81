"""
Unit tests for UpdateBookingToCancelledUseCase

Test Focus:
1. Only the ticket holder can cancel, and only before the visit
2. Fail Fast: booking not found, wrong owner, already cancelled
"""

from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, Mock

import attrs
import pytest

from src.platform.exception.exceptions import DomainError, ForbiddenError, NotFoundError
from src.service.museum.app.command.update_booking_status_to_cancelled_use_case import (
    UpdateBookingToCancelledUseCase,
)
from src.service.museum.domain.entity.booking_entity import Booking, BookingLineItem
from src.service.museum.domain.enum.booking_status import BookingStatus


@pytest.mark.unit
class TestUpdateBookingToCancelled:
    @pytest.fixture
    def confirmed_booking(self) -> Booking:
        return Booking(
            id=10,
            user_id=2,
            visit_date=date(2026, 10, 24),
            line_items=[
                BookingLineItem(ticket_id='adult', name='Adult', price=20, quantity=1),
                BookingLineItem(
                    ticket_id='1',
                    name='Impressionist Masters',
                    price=15,
                    quantity=1,
                    is_exhibition=True,
                ),
            ],
            total_price=35,
            created_at=datetime(2026, 10, 20, tzinfo=timezone.utc),
        )

    @pytest.fixture
    def mock_booking_query_repo(self, confirmed_booking: Booking) -> Mock:
        repo = AsyncMock()
        repo.get_by_id = AsyncMock(return_value=confirmed_booking)
        return repo

    @pytest.fixture
    def mock_booking_command_repo(self) -> Mock:
        repo = AsyncMock()
        repo.update_status = AsyncMock(side_effect=lambda *, booking: booking)
        return repo

    @pytest.fixture
    def use_case(
        self, mock_booking_command_repo: Mock, mock_booking_query_repo: Mock
    ) -> UpdateBookingToCancelledUseCase:
        return UpdateBookingToCancelledUseCase(
            booking_command_repo=mock_booking_command_repo,
            booking_query_repo=mock_booking_query_repo,
        )

    @pytest.mark.asyncio
    async def test_successfully_cancel(
        self,
        use_case: UpdateBookingToCancelledUseCase,
        mock_booking_command_repo: Mock,
        today: date,
    ) -> None:
        """
        Given: A confirmed booking for a future visit
        When: The holder cancels it
        Then: The stored booking is cancelled with a timestamp
        """
        result = await use_case.execute(booking_id=10, user_id=2, today=today)

        assert result.status == BookingStatus.CANCELLED
        assert result.cancelled_at is not None
        mock_booking_command_repo.update_status.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_fail_when_booking_not_found(
        self,
        use_case: UpdateBookingToCancelledUseCase,
        mock_booking_query_repo: Mock,
        today: date,
    ) -> None:
        mock_booking_query_repo.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError, match='Booking not found'):
            await use_case.execute(booking_id=999, user_id=2, today=today)

    @pytest.mark.asyncio
    async def test_fail_when_not_owner(
        self,
        use_case: UpdateBookingToCancelledUseCase,
        mock_booking_command_repo: Mock,
        today: date,
    ) -> None:
        with pytest.raises(ForbiddenError, match='Only the ticket holder can cancel this booking'):
            await use_case.execute(booking_id=10, user_id=3, today=today)
        mock_booking_command_repo.update_status.assert_not_called()

    @pytest.mark.asyncio
    async def test_fail_when_already_cancelled(
        self,
        use_case: UpdateBookingToCancelledUseCase,
        mock_booking_query_repo: Mock,
        confirmed_booking: Booking,
        today: date,
    ) -> None:
        mock_booking_query_repo.get_by_id = AsyncMock(
            return_value=attrs.evolve(confirmed_booking, status=BookingStatus.CANCELLED)
        )

        with pytest.raises(DomainError, match='Booking already cancelled'):
            await use_case.execute(booking_id=10, user_id=2, today=today)

    @pytest.mark.asyncio
    async def test_fail_after_visit_date(
        self, use_case: UpdateBookingToCancelledUseCase
    ) -> None:
        with pytest.raises(DomainError, match='Cannot cancel a booking for a past visit'):
            await use_case.execute(booking_id=10, user_id=2, today=date(2026, 10, 25))
