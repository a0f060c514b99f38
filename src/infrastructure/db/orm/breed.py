from __future__ import annotations

from sqlalchemy import Float, Integer, String
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class BreedORM(Base):
    __tablename__ = "breeds"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    species: Mapped[str] = mapped_column(String(100), nullable=False)
    pet_size: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    weight_min: Mapped[float] = mapped_column(Float, nullable=False)
    weight_max: Mapped[float] = mapped_column(Float, nullable=False)

    # Usable both on instances and inside WHERE clauses
    @hybrid_property
    def average_weight(self) -> float:
        return (self.weight_min + self.weight_max) / 2
