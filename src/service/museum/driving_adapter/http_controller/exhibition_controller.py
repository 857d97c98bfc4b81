from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from src.platform.logging.loguru_io import Logger
from src.service.museum.app.query.list_exhibitions_use_case import ListExhibitionsUseCase
from src.service.museum.domain.enum.exhibition_status import ExhibitionCategory
from src.service.museum.driving_adapter.http_controller.schema.exhibition_schema import (
    AvailabilityResponse,
    ExhibitionListResponse,
    ExhibitionResponse,
    TicketTypeListResponse,
    TicketTypeResponse,
)


router = APIRouter()
ticket_type_router = APIRouter()


@router.get('', response_model=ExhibitionListResponse)
@Logger.io
async def list_exhibitions(
    category: Optional[ExhibitionCategory] = None,
    use_case: ListExhibitionsUseCase = Depends(ListExhibitionsUseCase.depends),
) -> ExhibitionListResponse:
    today = date.today()
    exhibitions = await use_case.list_all(category=category, today=today)
    return ExhibitionListResponse(
        exhibitions=[ExhibitionResponse.from_entity(e, today=today) for e in exhibitions]
    )


@router.get('/{exhibition_id}', response_model=ExhibitionResponse)
@Logger.io
async def get_exhibition(
    exhibition_id: int,
    use_case: ListExhibitionsUseCase = Depends(ListExhibitionsUseCase.depends),
) -> ExhibitionResponse:
    exhibition = await use_case.get(exhibition_id=exhibition_id)
    return ExhibitionResponse.from_entity(exhibition, today=date.today())


@router.get('/{exhibition_id}/availability', response_model=AvailabilityResponse)
@Logger.io
async def check_availability(
    exhibition_id: int,
    visit_date: date = Query(..., alias='date'),
    use_case: ListExhibitionsUseCase = Depends(ListExhibitionsUseCase.depends),
) -> AvailabilityResponse:
    available = await use_case.is_available(exhibition_id=exhibition_id, visit_date=visit_date)
    return AvailabilityResponse(
        exhibition_id=exhibition_id, visit_date=visit_date, available=available
    )


@ticket_type_router.get('', response_model=TicketTypeListResponse)
@Logger.io
async def list_ticket_types(
    use_case: ListExhibitionsUseCase = Depends(ListExhibitionsUseCase.depends),
) -> TicketTypeListResponse:
    ticket_types = await use_case.list_ticket_types()
    return TicketTypeListResponse(
        ticket_types=[TicketTypeResponse.from_value(t) for t in ticket_types]
    )
