from datetime import date, datetime
import math
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.museum.domain.enum.exhibition_status import (
    ExhibitionCategory,
    ExhibitionStatus,
)


MAX_EXHIBITION_PRICE = 100_000


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'Exhibition {attribute.name} cannot be empty')


def _validate_price(instance: object, attribute: attrs.Attribute, value: float) -> None:
    if not math.isfinite(value):
        raise DomainError('Exhibition price must be a number')
    if value < 0:
        raise DomainError('Exhibition price cannot be negative')
    if value > MAX_EXHIBITION_PRICE:
        raise DomainError(f'Exhibition price cannot be more than {MAX_EXHIBITION_PRICE}')


@attrs.define
class Exhibition:
    name: str = attrs.field(validator=_validate_non_empty_string)
    description: str = attrs.field(validator=_validate_non_empty_string)
    start_date: date
    end_date: date
    price: float = attrs.field(converter=float, validator=_validate_price)
    image_url: str = ''
    status: ExhibitionStatus = attrs.field(
        default=ExhibitionStatus.ACTIVE, converter=ExhibitionStatus
    )
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __attrs_post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise DomainError('Exhibition end date must be on or after its start date')

    @property
    def is_active(self) -> bool:
        return self.status == ExhibitionStatus.ACTIVE

    def category_on(self, today: date) -> ExhibitionCategory:
        if self.start_date > today:
            return ExhibitionCategory.UPCOMING
        if self.end_date < today:
            return ExhibitionCategory.PAST
        return ExhibitionCategory.CURRENT

    def is_available_on(self, visit_date: date) -> bool:
        """An exhibition can be booked for any day of its run, both ends included."""
        return self.is_active and self.start_date <= visit_date <= self.end_date

    @Logger.io
    def validate_bookable_on(self, visit_date: date) -> None:
        if not self.is_active:
            raise DomainError(f'Exhibition "{self.name}" is not available for booking')
        if not self.start_date <= visit_date <= self.end_date:
            raise DomainError(
                f'Exhibition "{self.name}" runs from {self.start_date.isoformat()} '
                f'to {self.end_date.isoformat()}, not on {visit_date.isoformat()}'
            )

    @Logger.io
    def update(self, **changes: Any) -> 'Exhibition':
        """Return a copy with the given fields replaced; validators run again on the copy."""
        changes = {key: value for key, value in changes.items() if value is not None}
        return attrs.evolve(self, **changes)
