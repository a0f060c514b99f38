"""Seed the breeds table from a CSV file.

Expected layout: one header row, then six columns per row::

    <unused>, species, pet_size, name, weight_min, weight_max

Rows are inserted in file order inside a single unit of work, so the ids the
store assigns follow the file. Nothing is deduplicated: importing the same file
twice yields every breed twice.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

from src.application.errors import (
    BreedFileError,
    InsertFailed,
    InternalError,
    InvalidWeight,
    MalformedRow,
)
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breed import Breed

logger = logging.getLogger(__name__)

EXPECTED_COLUMNS = 6


@dataclass(slots=True)
class ImportBreedsResult:
    file_path: str
    inserted: int


def _parse_weight(value: str, *, line: int, column: str) -> float:
    try:
        return float(value.strip())
    except ValueError as exc:
        raise InvalidWeight(line, column, value) from exc


def parse_row(row: list[str], line: int) -> Breed:
    if len(row) != EXPECTED_COLUMNS:
        raise MalformedRow(line, len(row))
    return Breed.create(
        species=row[1].strip(),
        pet_size=row[2].strip(),
        name=row[3].strip(),
        weight_min=_parse_weight(row[4], line=line, column="weight_min"),
        weight_max=_parse_weight(row[5], line=line, column="weight_max"),
    )


def read_rows(file_path: Path) -> list[tuple[int, list[str]]]:
    """Return ``(line_number, row)`` pairs for every data row, header skipped."""
    try:
        with file_path.open(encoding="utf-8-sig", newline="") as fh:
            reader = csv.reader(fh, delimiter=",")
            rows = [(reader.line_num, row) for row in reader if row]
    except OSError as exc:
        raise BreedFileError(f"Cannot open file {file_path}: {exc}") from exc
    except csv.Error as exc:
        raise BreedFileError(f"Cannot read CSV file {file_path}: {exc}") from exc
    return rows[1:]


async def execute(uow: UnitOfWork, file_path: str | Path) -> ImportBreedsResult:
    path = Path(file_path)
    logger.info("Importing breeds from %s", path)
    inserted = 0
    for line, row in read_rows(path):
        breed = parse_row(row, line)
        try:
            await uow.breeds.add(breed)
        except InternalError as exc:
            raise InsertFailed(line) from exc
        inserted += 1
    await uow.commit()
    logger.info("Imported %d breeds from %s", inserted, path)
    return ImportBreedsResult(file_path=str(path), inserted=inserted)
