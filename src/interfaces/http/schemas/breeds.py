from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BreedBase(BaseModel):
    # NaN and Infinity literals cannot be stored or serialized back
    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    species: str
    average_weight: float


class BreedCreate(BreedBase):
    pass


class BreedUpdate(BreedBase):
    pass


class BreedResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    species: str
    average_weight: float
