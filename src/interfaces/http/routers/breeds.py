from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from src.application.use_cases.breeds import (
    create_breed,
    delete_breed,
    get_breed,
    list_breeds,
    search_breeds,
    update_breed,
)
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.breeds import BreedCreate, BreedResponse, BreedUpdate

router = APIRouter(prefix="/breeds", tags=["breeds"])

# Ids outside the INTEGER column range are rejected as malformed, not looked up
MAX_BREED_ID = 2**31 - 1
BreedId = Annotated[int, Path(ge=0, le=MAX_BREED_ID)]


@router.get("", response_model=list[BreedResponse])
async def list_all_breeds(*, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    breeds = await list_breeds.execute(uow)
    return [BreedResponse.model_validate(b) for b in breeds]


@router.post("", response_model=BreedResponse, status_code=status.HTTP_201_CREATED)
async def create(payload: BreedCreate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    created = await create_breed.execute(
        uow,
        create_breed.CreateBreedInput(
            name=payload.name,
            species=payload.species,
            average_weight=payload.average_weight,
        ),
    )
    return BreedResponse.model_validate(created)


# Registered before "/{breed_id}" so "search" is not parsed as an id
@router.get("/search", response_model=list[BreedResponse])
async def search(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    species: str | None = Query(None),
    weight: str | None = Query(None, description="Max average weight; ignored if not a number"),
):
    breeds = await search_breeds.execute(uow, species=species, weight=weight)
    return [BreedResponse.model_validate(b) for b in breeds]


@router.get("/{breed_id}", response_model=BreedResponse)
async def get_by_id(breed_id: BreedId, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    breed = await get_breed.execute(uow, breed_id)
    return BreedResponse.model_validate(breed)


@router.put("/{breed_id}", response_class=Response)
async def update(
    breed_id: BreedId,
    payload: BreedUpdate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
) -> Response:
    await update_breed.execute(
        uow,
        breed_id,
        update_breed.UpdateBreedInput(
            name=payload.name,
            species=payload.species,
            average_weight=payload.average_weight,
        ),
    )
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{breed_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete(
    breed_id: BreedId, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
) -> Response:
    await delete_breed.execute(uow, breed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
