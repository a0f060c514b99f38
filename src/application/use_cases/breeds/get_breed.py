from __future__ import annotations

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breed import Breed


async def execute(uow: UnitOfWork, breed_id: int) -> Breed:
    breed = await uow.breeds.get(breed_id)
    if not breed:
        raise NotFound("Breed not found")
    return breed
