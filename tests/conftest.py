from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import breed  # noqa: F401
from src.interfaces.http.main import create_app

CSV_HEADER = "id,species,pet_size,name,weight_min,weight_max"

SAMPLE_ROWS = [
    "1,Dog,medium,Australian Shepherd,16,32",
    "2,Dog,small,Beagle,9,11",
    "3,Dog,large,Bernese Mountain Dog,36,52",
    "4,Cat,small,Abyssinian,3,5",
    "5,Cat,large,Maine Coon,5,11",
]


def make_settings(db_path: Path, **overrides) -> Settings:
    values = {
        "database_url": f"sqlite+aiosqlite:///{db_path}",
        "log_level": "INFO",
        "environment": "test",
        "auto_create_schema": True,
    }
    values.update(overrides)
    return Settings.model_validate(values)


@pytest.fixture()
def write_csv(tmp_path) -> Callable[..., Path]:
    def _write(rows: list[str], *, header: str = CSV_HEADER, name: str = "breeds.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    return make_settings(tmp_path / "test.db")


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
def sample_rows() -> list[str]:
    return list(SAMPLE_ROWS)


@pytest.fixture()
def settings_factory(tmp_path) -> Callable[..., Settings]:
    def _make(db_name: str = "app.db", **overrides) -> Settings:
        return make_settings(tmp_path / db_name, **overrides)

    return _make
