from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from src.domain.models.breed import Breed


@dataclass(slots=True, frozen=True)
class BreedFilters:
    species: str | None = None
    max_average_weight: float | None = None


class BreedsRepo(ABC):
    @abstractmethod
    async def add(self, breed: Breed) -> int: ...

    @abstractmethod
    async def get(self, breed_id: int) -> Breed | None: ...

    @abstractmethod
    async def list(self, filters: BreedFilters | None = None) -> list[Breed]: ...

    @abstractmethod
    async def update(self, breed_id: int, data: dict) -> int: ...

    @abstractmethod
    async def delete(self, breed_id: int) -> int: ...
