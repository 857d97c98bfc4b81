from datetime import date, datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from src.service.museum.driven_adapter.model.booking_line_item_model import (
        BookingLineItemModel,
    )


class BookingModel(Base):
    __tablename__ = 'booking'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True
    )
    visit_date: Mapped[date] = mapped_column(Date, nullable=False)
    total_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='confirmed', nullable=False)
    payment_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, unique=True)
    contact_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    cancelled_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    line_items: Mapped[List['BookingLineItemModel']] = relationship(
        'BookingLineItemModel',
        back_populates='booking',
        cascade='all, delete-orphan',
        order_by='BookingLineItemModel.id',
        lazy='selectin',
    )

    def __repr__(self):
        return f'<BookingModel(id={self.id}, user_id={self.user_id}, status={self.status})>'
