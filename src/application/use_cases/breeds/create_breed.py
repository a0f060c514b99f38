from __future__ import annotations

from dataclasses import dataclass

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breed import Breed


@dataclass(slots=True)
class CreateBreedInput:
    name: str
    species: str
    average_weight: float


async def execute(uow: UnitOfWork, payload: CreateBreedInput) -> Breed:
    breed = Breed.from_average_weight(
        name=payload.name,
        species=payload.species,
        average_weight=payload.average_weight,
    )
    breed.id = await uow.breeds.add(breed)
    await uow.commit()
    return breed
