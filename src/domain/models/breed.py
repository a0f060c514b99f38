from __future__ import annotations

from dataclasses import dataclass

UNKNOWN_PET_SIZE = "Unknown"
# Half-width of the weight band synthesized around a client-supplied average.
WEIGHT_BAND = 1.0


@dataclass(slots=True)
class Breed:
    id: int | None
    species: str
    pet_size: str
    name: str
    weight_min: float
    weight_max: float

    @property
    def average_weight(self) -> float:
        return (self.weight_min + self.weight_max) / 2

    @classmethod
    def create(
        cls,
        *,
        species: str,
        pet_size: str,
        name: str,
        weight_min: float,
        weight_max: float,
    ) -> Breed:
        return cls(
            id=None,
            species=species,
            pet_size=pet_size,
            name=name,
            weight_min=weight_min,
            weight_max=weight_max,
        )

    @classmethod
    def from_average_weight(
        cls,
        *,
        name: str,
        species: str,
        average_weight: float,
        pet_size: str = UNKNOWN_PET_SIZE,
    ) -> Breed:
        weight_min, weight_max = weight_band(average_weight)
        return cls.create(
            species=species,
            pet_size=pet_size,
            name=name,
            weight_min=weight_min,
            weight_max=weight_max,
        )


def weight_band(average_weight: float) -> tuple[float, float]:
    """Return the (min, max) pair stored for an API-supplied average weight.

    Only the average survives the round trip; any real min/max is lost.
    """
    return average_weight - WEIGHT_BAND, average_weight + WEIGHT_BAND
