from __future__ import annotations

from dataclasses import dataclass

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breed import weight_band


@dataclass(slots=True)
class UpdateBreedInput:
    name: str
    species: str
    average_weight: float


async def execute(uow: UnitOfWork, breed_id: int, payload: UpdateBreedInput) -> int:
    """Replace name, species and weight band of a breed.

    Returns the number of affected rows. An unknown id is not an error: the
    update simply touches nothing and 0 is returned.
    """
    weight_min, weight_max = weight_band(payload.average_weight)
    affected = await uow.breeds.update(
        breed_id,
        {
            "name": payload.name,
            "species": payload.species,
            "weight_min": weight_min,
            "weight_max": weight_max,
        },
    )
    await uow.commit()
    return affected
