"""Producer ORM — the single persisted entity.

Invariants:
    - id is an autoincrement integer primary key
    - All other columns are non-nullable and replaced together on update
    - crops stores a JSON array of strings

Design Decisions:
    - JSON column for crops instead of a PostgreSQL ARRAY: same model runs on
      PostgreSQL (asyncpg) and SQLite (aiosqlite, used in tests)
"""

from sqlalchemy import Integer, String, Float, JSON
from sqlalchemy.orm import Mapped, mapped_column

from producer_registry.db.base import Base


class Producer(Base):
    """Agricultural producer: owner identity, farm and land-use breakdown."""
    __tablename__ = "producers"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    cpf_cnpj: Mapped[str] = mapped_column(String(14), nullable=False)
    producer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    farm_name: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    state: Mapped[str] = mapped_column(String(255), nullable=False)
    total_area: Mapped[float] = mapped_column(Float, nullable=False)
    cultivable_area: Mapped[float] = mapped_column(Float, nullable=False)
    vegetation_area: Mapped[float] = mapped_column(Float, nullable=False)
    crops: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
