"""
Administrator endpoints; every route requires the admin role
"""

from datetime import date

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.museum.app.command.create_exhibition_use_case import CreateExhibitionUseCase
from src.service.museum.app.command.delete_exhibition_use_case import DeleteExhibitionUseCase
from src.service.museum.app.command.delete_user_use_case import DeleteUserUseCase
from src.service.museum.app.command.update_exhibition_use_case import UpdateExhibitionUseCase
from src.service.museum.app.query.get_analytics_use_case import GetAnalyticsUseCase
from src.service.museum.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.museum.app.query.list_exhibitions_use_case import ListExhibitionsUseCase
from src.service.museum.app.query.list_users_use_case import ListUsersUseCase
from src.service.museum.domain.entity.user_entity import UserEntity
from src.service.museum.driving_adapter.http_controller.auth.role_auth import require_admin
from src.service.museum.driving_adapter.http_controller.schema.admin_schema import (
    AnalyticsResponse,
    MessageResponse,
    TransactionListResponse,
    TransactionResponse,
    UserListResponse,
)
from src.service.museum.driving_adapter.http_controller.schema.exhibition_schema import (
    ExhibitionCreateRequest,
    ExhibitionEnvelopeResponse,
    ExhibitionListResponse,
    ExhibitionResponse,
    ExhibitionUpdateRequest,
)
from src.service.museum.driving_adapter.http_controller.schema.user_schema import UserResponse


router = APIRouter(dependencies=[Depends(require_admin)])


# ============================ Users ============================


@router.get('/users', response_model=UserListResponse)
@Logger.io
async def list_users(
    use_case: ListUsersUseCase = Depends(ListUsersUseCase.depends),
) -> UserListResponse:
    users = await use_case.execute()
    return UserListResponse(users=[UserResponse.from_entity(u) for u in users])


@router.delete('/users/{user_id}', response_model=MessageResponse)
@Logger.io
async def delete_user(
    user_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: DeleteUserUseCase = Depends(DeleteUserUseCase.depends),
) -> MessageResponse:
    await use_case.execute(user_id=user_id, requested_by=current_user.id or 0)
    return MessageResponse(message='User deleted successfully')


# ============================ Exhibitions ============================


@router.get('/exhibitions', response_model=ExhibitionListResponse)
@Logger.io
async def list_exhibitions(
    use_case: ListExhibitionsUseCase = Depends(ListExhibitionsUseCase.depends),
) -> ExhibitionListResponse:
    today = date.today()
    exhibitions = await use_case.list_all(today=today)
    return ExhibitionListResponse(
        exhibitions=[ExhibitionResponse.from_entity(e, today=today) for e in exhibitions]
    )


@router.post(
    '/exhibitions',
    response_model=ExhibitionEnvelopeResponse,
    status_code=status.HTTP_201_CREATED,
)
@Logger.io
async def create_exhibition(
    request: ExhibitionCreateRequest,
    use_case: CreateExhibitionUseCase = Depends(CreateExhibitionUseCase.depends),
) -> ExhibitionEnvelopeResponse:
    exhibition = await use_case.execute(
        name=request.name,
        description=request.description,
        start_date=request.start_date,
        end_date=request.end_date,
        price=request.price,
        image_url=request.image_url,
        status=request.status,
    )
    return ExhibitionEnvelopeResponse(
        message='Exhibition created successfully',
        exhibition=ExhibitionResponse.from_entity(exhibition, today=date.today()),
    )


@router.put('/exhibitions/{exhibition_id}', response_model=ExhibitionEnvelopeResponse)
@Logger.io
async def update_exhibition(
    exhibition_id: int,
    request: ExhibitionUpdateRequest,
    use_case: UpdateExhibitionUseCase = Depends(UpdateExhibitionUseCase.depends),
) -> ExhibitionEnvelopeResponse:
    exhibition = await use_case.execute(
        exhibition_id=exhibition_id,
        **request.model_dump(exclude_unset=True),
    )
    return ExhibitionEnvelopeResponse(
        message='Exhibition updated successfully',
        exhibition=ExhibitionResponse.from_entity(exhibition, today=date.today()),
    )


@router.delete('/exhibitions/{exhibition_id}', response_model=MessageResponse)
@Logger.io
async def delete_exhibition(
    exhibition_id: int,
    use_case: DeleteExhibitionUseCase = Depends(DeleteExhibitionUseCase.depends),
) -> MessageResponse:
    await use_case.execute(exhibition_id=exhibition_id)
    return MessageResponse(message='Exhibition deleted successfully')


# ============================ Reporting ============================


@router.get('/transactions', response_model=TransactionListResponse)
@Logger.io
async def list_transactions(
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> TransactionListResponse:
    rows = await use_case.list_transactions()
    return TransactionListResponse(
        transactions=[TransactionResponse.from_dto(row) for row in rows]
    )


@router.get('/analytics', response_model=AnalyticsResponse)
@Logger.io
async def get_analytics(
    use_case: GetAnalyticsUseCase = Depends(GetAnalyticsUseCase.depends),
) -> AnalyticsResponse:
    report = await use_case.execute()
    return AnalyticsResponse.from_report(report)
