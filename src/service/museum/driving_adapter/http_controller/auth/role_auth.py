from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.service.museum.domain.entity.user_entity import UserEntity
from src.service.museum.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserEntity:
    token = credentials.credentials if credentials else None
    return await jwt_auth.get_current_user(token)


async def require_admin(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    current_user.validate_admin()
    return current_user
