from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, breed_id: int) -> int:
    # Deleting an unknown id is a silent no-op; callers get 0 back
    affected = await uow.breeds.delete(breed_id)
    await uow.commit()
    return affected
