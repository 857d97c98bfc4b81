from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from src.service.museum.driven_adapter.model.booking_model import BookingModel


class BookingLineItemModel(Base):
    """Ticket line of a booking; name and price are copied at booking time."""

    __tablename__ = 'booking_line_item'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    booking_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('booking.id', ondelete='CASCADE'), nullable=False, index=True
    )
    ticket_id: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    is_exhibition: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    booking: Mapped['BookingModel'] = relationship('BookingModel', back_populates='line_items')
