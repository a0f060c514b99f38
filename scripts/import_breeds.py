#!/usr/bin/env python3
"""
Import breeds from a CSV file into the configured database.

The service normally does this at startup when BREEDS_CSV_PATH is set; this
script runs the same import by hand, e.g. to seed a database whose schema was
created with `alembic upgrade head`.

Usage:
  python scripts/import_breeds.py --file ./breeds.csv [--create-schema]

Rows are appended: running it twice duplicates every breed.
"""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.errors import BreedImportError
from src.application.use_cases.breeds import import_breeds
from src.config.settings import get_settings
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_schema,
    create_session_factory,
)


async def run_import(file_path: Path, *, with_schema: bool) -> int:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)

    try:
        if with_schema:
            await create_schema(engine)
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            result = await import_breeds.execute(uow, file_path)
        return result.inserted
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Import breeds from a CSV file")
    parser.add_argument("--file", required=True, help="Path to the breeds CSV file")
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing tables before importing",
    )

    args = parser.parse_args()
    csv_path = Path(args.file)
    if not csv_path.is_file():
        print(f"❌ Error: '{csv_path}' is not a file")
        sys.exit(1)

    try:
        inserted = asyncio.run(run_import(csv_path, with_schema=args.create_schema))
    except BreedImportError as exc:
        print(f"❌ Import failed: {exc.message}")
        sys.exit(1)

    print(f"✅ Imported {inserted} breeds from {csv_path}")
