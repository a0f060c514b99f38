from __future__ import annotations

import pytest
from sqlalchemy import func, select

from src.application.errors import InvalidWeight
from src.application.use_cases.breeds import import_breeds
from src.infrastructure.db.orm.breed import BreedORM
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def count_breeds(app) -> int:
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        return (await session.execute(select(func.count()).select_from(BreedORM))).scalar_one()


async def test_import_then_list_matches_file(app, client, write_csv, sample_rows):
    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        result = await import_breeds.execute(uow, write_csv(sample_rows))
    assert result.inserted == len(sample_rows)

    body = (await client.get("/breeds")).json()
    assert [b["id"] for b in body] == sorted(b["id"] for b in body)
    assert [(b["species"], b["name"]) for b in body] == [
        (r.split(",")[1], r.split(",")[3]) for r in sample_rows
    ]


async def test_failed_import_leaves_no_rows(app, client, write_csv, sample_rows):
    path = write_csv([*sample_rows, "6,Dog,small,Broken,x,2"])
    with pytest.raises(InvalidWeight):
        async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
            await import_breeds.execute(uow, path)

    assert await count_breeds(app) == 0


async def test_reimport_duplicates_rows(app, client, write_csv, sample_rows):
    path = write_csv(sample_rows)
    for _ in range(2):
        async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
            await import_breeds.execute(uow, path)

    assert await count_breeds(app) == 2 * len(sample_rows)
