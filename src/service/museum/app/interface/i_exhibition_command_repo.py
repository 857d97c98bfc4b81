from abc import ABC, abstractmethod

from src.service.museum.domain.entity.exhibition_entity import Exhibition


class IExhibitionCommandRepo(ABC):
    @abstractmethod
    async def create(self, exhibition: Exhibition) -> Exhibition:
        pass

    @abstractmethod
    async def update(self, exhibition: Exhibition) -> Exhibition:
        pass

    @abstractmethod
    async def delete(self, *, exhibition_id: int) -> bool:
        pass
