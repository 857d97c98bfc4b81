from datetime import date
from typing import List, Optional

from pydantic import ConfigDict, Field

from src.service.museum.domain.entity.exhibition_entity import Exhibition
from src.service.museum.domain.enum.exhibition_status import (
    ExhibitionCategory,
    ExhibitionStatus,
)
from src.service.museum.domain.value_object.ticket_type import TicketType
from src.service.museum.driving_adapter.http_controller.schema.camel_schema import CamelModel


class ExhibitionCreateRequest(CamelModel):
    name: str
    description: str
    start_date: date
    end_date: date
    price: float = Field(allow_inf_nan=False)
    image_url: str = ''
    status: ExhibitionStatus = ExhibitionStatus.ACTIVE

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Impressionist Masters',
                'description': 'Monet, Renoir and Degas from private collections',
                'startDate': '2026-10-01',
                'endDate': '2027-01-31',
                'price': 15,
                'imageUrl': 'https://example.com/impressionists.jpg',
                'status': 'active',
            }
        }
    )


class ExhibitionUpdateRequest(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    price: Optional[float] = Field(default=None, allow_inf_nan=False)
    image_url: Optional[str] = None
    status: Optional[ExhibitionStatus] = None

    model_config = ConfigDict(json_schema_extra={'example': {'price': 18, 'status': 'inactive'}})


class ExhibitionResponse(CamelModel):
    id: int
    name: str
    description: str
    start_date: date
    end_date: date
    price: float
    image_url: str
    status: ExhibitionStatus
    category: ExhibitionCategory

    @classmethod
    def from_entity(cls, exhibition: Exhibition, *, today: date) -> 'ExhibitionResponse':
        return cls(
            id=exhibition.id or 0,
            name=exhibition.name,
            description=exhibition.description,
            start_date=exhibition.start_date,
            end_date=exhibition.end_date,
            price=exhibition.price,
            image_url=exhibition.image_url,
            status=exhibition.status,
            category=exhibition.category_on(today),
        )


class ExhibitionListResponse(CamelModel):
    exhibitions: List[ExhibitionResponse]


class ExhibitionEnvelopeResponse(CamelModel):
    message: str
    exhibition: ExhibitionResponse


class AvailabilityResponse(CamelModel):
    exhibition_id: int
    visit_date: date = Field(alias='date')
    available: bool


class TicketTypeResponse(CamelModel):
    id: str
    name: str
    price: float
    description: str
    is_exhibition: bool
    available: bool
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @classmethod
    def from_value(cls, ticket_type: TicketType) -> 'TicketTypeResponse':
        return cls(
            id=ticket_type.id,
            name=ticket_type.name,
            price=ticket_type.price,
            description=ticket_type.description,
            is_exhibition=ticket_type.is_exhibition,
            available=ticket_type.available,
            start_date=ticket_type.start_date,
            end_date=ticket_type.end_date,
        )


class TicketTypeListResponse(CamelModel):
    ticket_types: List[TicketTypeResponse]
