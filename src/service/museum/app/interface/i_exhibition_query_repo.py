from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from src.service.museum.domain.entity.exhibition_entity import Exhibition


class IExhibitionQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, exhibition_id: int) -> Optional[Exhibition]:
        pass

    @abstractmethod
    async def get_by_ids(self, *, exhibition_ids: Iterable[int]) -> Dict[int, Exhibition]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Exhibition]:
        """Every exhibition ordered by start date."""

    @abstractmethod
    async def count_active(self) -> int:
        pass
