from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from src.application.errors import InvalidWeight, MalformedRow
from src.interfaces.http.main import create_app


async def test_startup_imports_csv_in_file_order(settings_factory, write_csv, sample_rows):
    csv_path = write_csv(sample_rows)
    app = create_app(settings=settings_factory("startup.db", breeds_csv_path=str(csv_path)))

    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            resp = await client.get("/breeds")

    assert resp.status_code == 200
    api_breeds = resp.json()
    assert len(api_breeds) == len(sample_rows)
    for row, api in zip(sample_rows, api_breeds):
        _, species, _, name, weight_min, weight_max = row.split(",")
        assert api["species"] == species
        assert api["name"] == name
        assert api["average_weight"] == (float(weight_min) + float(weight_max)) / 2


async def test_startup_with_api_prefix(settings_factory, write_csv, sample_rows):
    csv_path = write_csv(sample_rows[:2])
    app = create_app(
        settings=settings_factory("prefixed.db", breeds_csv_path=str(csv_path), api_prefix="v1/")
    )

    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            prefixed = await client.get("/v1/breeds")
            health = await client.get("/health")
            unprefixed = await client.get("/breeds")

    assert prefixed.status_code == 200
    assert len(prefixed.json()) == 2
    assert health.status_code == 200
    assert unprefixed.status_code == 404


async def test_malformed_csv_aborts_startup(settings_factory, write_csv, sample_rows):
    csv_path = write_csv([sample_rows[0], "2,Dog,small,Beagle,9"])
    app = create_app(settings=settings_factory("broken.db", breeds_csv_path=str(csv_path)))

    with pytest.raises(MalformedRow) as info:
        async with app.router.lifespan_context(app):
            pass
    assert info.value.line == 3


async def test_invalid_weight_aborts_startup(settings_factory, write_csv):
    csv_path = write_csv(["1,Dog,small,Beagle,nine,11"])
    app = create_app(settings=settings_factory("broken.db", breeds_csv_path=str(csv_path)))

    with pytest.raises(InvalidWeight) as info:
        async with app.router.lifespan_context(app):
            pass
    assert info.value.line == 2
    assert info.value.column == "weight_min"
