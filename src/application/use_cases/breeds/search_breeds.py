from __future__ import annotations

import logging

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breed import Breed
from src.domain.ports.breeds_repo import BreedFilters

logger = logging.getLogger(__name__)


def parse_weight(raw: str | None) -> float | None:
    """Parse the ``weight`` filter, returning None when it cannot be used.

    A value that is not a number drops the filter instead of failing the
    request, so ``?weight=abc`` behaves exactly like no ``weight`` at all.
    Surrounding whitespace and digit separators (``1_000``) count as not a
    number even though ``float()`` would take them.
    """
    if not raw:
        return None
    if raw != raw.strip() or "_" in raw:
        logger.debug("Ignoring unparseable weight filter: %r", raw)
        return None
    try:
        return float(raw)
    except ValueError:
        logger.debug("Ignoring unparseable weight filter: %r", raw)
        return None


def build_filters(species: str | None, weight: str | None) -> BreedFilters:
    return BreedFilters(
        species=species or None,
        max_average_weight=parse_weight(weight),
    )


async def execute(
    uow: UnitOfWork,
    *,
    species: str | None = None,
    weight: str | None = None,
) -> list[Breed]:
    return await uow.breeds.list(build_filters(species, weight))
