from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.command.sign_up_user_use_case import SignUpUserUseCase
from src.service.museum.app.query.authenticate_user_use_case import AuthenticateUserUseCase
from src.service.museum.domain.entity.user_entity import UserEntity
from src.service.museum.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.museum.driving_adapter.http_controller.auth.role_auth import get_current_user
from src.service.museum.driving_adapter.http_controller.schema.user_schema import (
    AuthResponse,
    LoginRequest,
    SignUpRequest,
    UserResponse,
    ValidateTokenResponse,
)


# === API Routers ===
# `router` is mounted under both /api and /api/auth

router = APIRouter()
auth_router = APIRouter()


@router.post('/signup', response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def signup(
    request: SignUpRequest,
    use_case: SignUpUserUseCase = Depends(SignUpUserUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AuthResponse:
    user_entity = await use_case.execute(
        name=request.name,
        email=request.email,
        password=request.password.get_secret_value(),
    )

    return AuthResponse(
        message='User created successfully',
        token=jwt_auth.create_jwt_token(user_entity),
        user=UserResponse.from_entity(user_entity),
    )


@router.post('/login', response_model=AuthResponse, response_model_exclude_none=True)
@Logger.io
@inject
async def login(
    request: LoginRequest,
    use_case: AuthenticateUserUseCase = Depends(AuthenticateUserUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AuthResponse:
    user_entity = await use_case.execute(
        email=request.email,
        password=request.password.get_secret_value(),
    )

    return AuthResponse(
        token=jwt_auth.create_jwt_token(user_entity),
        user=UserResponse.from_entity(user_entity),
    )


@auth_router.get('/validate', response_model=ValidateTokenResponse)
@Logger.io
async def validate_token(
    current_user: UserEntity = Depends(get_current_user),
) -> ValidateTokenResponse:
    return ValidateTokenResponse(user=UserResponse.from_entity(current_user))
