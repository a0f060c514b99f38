from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breed import Breed


async def execute(uow: UnitOfWork) -> list[Breed]:
    return await uow.breeds.list()
