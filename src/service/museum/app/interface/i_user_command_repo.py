from abc import ABC, abstractmethod

from src.service.museum.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    @abstractmethod
    async def create(self, user_entity: UserEntity) -> UserEntity:
        """Persist a new user; raises DomainError when the email is taken."""

    @abstractmethod
    async def delete(self, *, user_id: int) -> bool:
        """Delete a user together with their bookings; False if the user does not exist."""
