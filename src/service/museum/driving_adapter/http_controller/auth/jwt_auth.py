"""
Bearer token issuing and checking
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from src.platform.config.core_setting import Settings, settings
from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.museum.domain.entity.user_entity import UserEntity


class JwtAuth:
    def __init__(self, *, user_query_repo: IUserQueryRepo, config: Optional[Settings] = None):
        config = config or settings
        self.user_query_repo = user_query_repo
        self.secret = config.SECRET_KEY.get_secret_value()
        self.algorithm = config.ALGORITHM
        self.token_expire_hours = config.ACCESS_TOKEN_EXPIRE_HOURS

    def create_jwt_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'user_id': user_entity.id,
            'iat': now,
            'exp': now + timedelta(hours=self.token_expire_hours),
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError('Token expired') from e
        except jwt.PyJWTError as e:
            raise AuthenticationError('Invalid token') from e

    @Logger.io
    async def get_current_user(self, token: Optional[str]) -> UserEntity:
        """Resolve the bearer token to a stored user; the account must still exist."""
        if not token:
            raise AuthenticationError('Authentication required')

        payload = self.decode_jwt_token(token)
        user_id = payload.get('user_id')
        if not isinstance(user_id, int):
            raise AuthenticationError('Invalid token')

        user_entity = await self.user_query_repo.get_by_id(user_id)
        if not user_entity:
            raise AuthenticationError('User not found')

        return user_entity
