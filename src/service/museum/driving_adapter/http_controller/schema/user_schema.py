"""
User API Schemas - Pydantic models for request/response
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, SecretStr

from src.service.museum.domain.entity.user_entity import UserEntity, UserRole
from src.service.museum.driving_adapter.http_controller.schema.camel_schema import CamelModel


class SignUpRequest(CamelModel):
    """Field rules (email format, name length, password length) are enforced by UserEntity"""

    name: str
    email: str
    password: SecretStr

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Ada Lovelace',
                'email': 'ada@example.com',
                'password': 'P@ssw0rd',
            }
        }
    )


class LoginRequest(CamelModel):
    email: str
    password: SecretStr

    model_config = ConfigDict(
        json_schema_extra={'example': {'email': 'ada@example.com', 'password': 'P@ssw0rd'}}
    )


class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user_entity: UserEntity) -> 'UserResponse':
        return cls(
            id=user_entity.id or 0,
            name=user_entity.name,
            email=user_entity.email,
            role=user_entity.role,
            created_at=user_entity.created_at,
        )


class AuthResponse(CamelModel):
    message: Optional[str] = None
    token: str
    user: UserResponse

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'message': 'User created successfully',
                'token': 'eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...',
                'user': {'id': 1, 'name': 'Ada Lovelace', 'email': 'ada@example.com', 'role': 'user'},
            }
        }
    )


class ValidateTokenResponse(CamelModel):
    user: UserResponse
