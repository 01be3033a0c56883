"""Producer Store — one SQL statement per operation against the producers table.

Invariants:
    - Every operation issues exactly one statement (INSERT/UPDATE/DELETE ... RETURNING,
      or a single SELECT)
    - Statements are SQLAlchemy expressions: user values travel as bound parameters
    - update/delete return None when no row matched; the caller decides what that means
    - Any SQLAlchemyError is rolled back, logged and re-raised as DatabaseError (no retry)

Design Decisions:
    - Store wraps the request-scoped AsyncSession; it never opens or closes sessions
    - RETURNING rows are read before commit, then converted to ProducerOut so routes
      never touch ORM instances
"""

import logging
from typing import Any, Callable

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from producer_registry.core.errors import DatabaseError, ErrorContext
from producer_registry.models.producer import Producer
from producer_registry.schemas.producer import (
    DashboardStats, ProducerIn, ProducerOut,
)

logger = logging.getLogger(__name__)


class ProducerStore:
    """CRUD and aggregate queries for producers."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[ProducerOut]:
        """All rows. No ordering guarantee, no pagination."""
        rows = await self._run(
            "select", select(Producer), lambda r: r.scalars().all(),
        )
        return [ProducerOut.model_validate(row) for row in rows]

    async def create(self, producer: ProducerIn) -> ProducerOut:
        """Insert one row and return it with the generated id."""
        stmt = (
            insert(Producer)
            .values(**producer.model_dump())
            .returning(Producer)
        )
        row = await self._run(
            "insert", stmt, lambda r: r.scalars().one(), commit=True,
        )
        created = ProducerOut.model_validate(row)
        logger.info("Producer created", extra={"producer_id": created.id})
        return created

    async def update(
        self, producer_id: int, producer: ProducerIn,
    ) -> ProducerOut | None:
        """Replace every mutable column of the matching row."""
        stmt = (
            update(Producer)
            .where(Producer.id == producer_id)
            .values(**producer.model_dump())
            .returning(Producer)
        )
        row = await self._run(
            "update", stmt, lambda r: r.scalars().one_or_none(),
            commit=True, producer_id=producer_id,
        )
        if row is None:
            logger.info(
                "Update matched no producer", extra={"producer_id": producer_id},
            )
            return None
        return ProducerOut.model_validate(row)

    async def delete(self, producer_id: int) -> ProducerOut | None:
        """Remove the matching row and return it as it was."""
        stmt = (
            delete(Producer)
            .where(Producer.id == producer_id)
            .returning(Producer)
        )
        row = await self._run(
            "delete", stmt, lambda r: r.scalars().one_or_none(),
            commit=True, producer_id=producer_id,
        )
        if row is None:
            logger.info(
                "Delete matched no producer", extra={"producer_id": producer_id},
            )
            return None
        return ProducerOut.model_validate(row)

    async def aggregate(self) -> DashboardStats:
        """Row count and total_area sum in a single SELECT."""
        stmt = select(
            func.count(Producer.id),
            func.coalesce(func.sum(Producer.total_area), 0),
        )
        total_farms, total_area = await self._run(
            "aggregate", stmt, lambda r: r.one(),
        )
        return DashboardStats(
            total_farms=total_farms, total_area=float(total_area),
        )

    async def _run(
        self,
        operation: str,
        stmt,
        fetch: Callable[[Result], Any],
        commit: bool = False,
        producer_id: int | None = None,
    ) -> Any:
        """Execute stmt, fetch its rows and optionally commit."""
        try:
            result = await self.db.execute(stmt)
            rows = fetch(result)
            if commit:
                await self.db.commit()
            return rows
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Producer {operation} failed: {e}",
                extra={"operation": operation, "producer_id": producer_id},
            )
            raise DatabaseError(
                "statement failed", operation,
                ErrorContext(producer_id=producer_id),
            ) from e
