from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import InternalError
from src.domain.models.breed import Breed
from src.domain.ports.breeds_repo import BreedFilters, BreedsRepo
from src.infrastructure.db.orm.breed import BreedORM


class BreedsSQLAlchemyRepository(BreedsRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedORM) -> Breed:
        return Breed(
            id=orm.id,
            species=orm.species,
            pet_size=orm.pet_size,
            name=orm.name,
            weight_min=orm.weight_min,
            weight_max=orm.weight_max,
        )

    async def add(self, breed: Breed) -> int:
        orm = BreedORM(
            species=breed.species,
            pet_size=breed.pet_size,
            name=breed.name,
            weight_min=breed.weight_min,
            weight_max=breed.weight_max,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise InternalError("Failed to create breed") from exc
        return orm.id

    async def get(self, breed_id: int) -> Breed | None:
        stmt = select(BreedORM).where(BreedORM.id == breed_id)
        try:
            res = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise InternalError("Failed to fetch breed") from exc
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, filters: BreedFilters | None = None) -> list[Breed]:
        # No ORDER BY: rows come back in the engine's natural order
        stmt = select(BreedORM)
        if filters is not None:
            if filters.species:
                stmt = stmt.where(BreedORM.species == filters.species)
            if filters.max_average_weight is not None:
                stmt = stmt.where(BreedORM.average_weight <= filters.max_average_weight)
        try:
            res = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise InternalError("Failed to fetch breeds") from exc
        return [self._to_domain(x) for x in res.scalars().all()]

    async def update(self, breed_id: int, data: dict) -> int:
        stmt = (
            update(BreedORM)
            .where(BreedORM.id == breed_id)
            .values(**data)
            .execution_options(synchronize_session=False)
        )
        try:
            res = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise InternalError("Failed to update breed") from exc
        return res.rowcount

    async def delete(self, breed_id: int) -> int:
        stmt = (
            delete(BreedORM)
            .where(BreedORM.id == breed_id)
            .execution_options(synchronize_session=False)
        )
        try:
            res = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise InternalError("Failed to delete breed") from exc
        return res.rowcount
