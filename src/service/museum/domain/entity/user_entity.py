from datetime import datetime
from enum import Enum
import re
from typing import TYPE_CHECKING, Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import DomainError, ForbiddenError, LoginError


if TYPE_CHECKING:
    from src.service.museum.app.interface.i_password_hasher import IPasswordHasher


EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
NAME_MAX_LENGTH = 60
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 72  # bcrypt ignores anything past 72 bytes


class UserRole(str, Enum):
    USER = 'user'
    ADMIN = 'admin'


def _validate_name(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError('Name is required')
    if len(value) > NAME_MAX_LENGTH:
        raise DomainError(f'Name cannot be more than {NAME_MAX_LENGTH} characters')


def _validate_email(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not EMAIL_PATTERN.match(value or ''):
        raise DomainError('Please provide a valid email')


@attrs.define
class UserEntity:
    email: str = attrs.field(converter=lambda v: v.strip().lower(), validator=_validate_email)
    name: str = attrs.field(converter=str.strip, validator=_validate_name)
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    role: UserRole = UserRole.USER
    created_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def validate_admin(self) -> None:
        if not self.is_admin:
            raise ForbiddenError('Admin access required')

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise LoginError('Invalid credentials')

        return user_entity

    @staticmethod
    def validate_password_strength(plain_password: str) -> None:
        if len(plain_password) < PASSWORD_MIN_LENGTH:
            raise DomainError(f'Password must be at least {PASSWORD_MIN_LENGTH} characters')
        if len(plain_password.encode('utf-8')) > PASSWORD_MAX_LENGTH:
            raise DomainError(f'Password cannot be more than {PASSWORD_MAX_LENGTH} bytes')

    def set_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> None:
        self.validate_password_strength(plain_password)
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )
