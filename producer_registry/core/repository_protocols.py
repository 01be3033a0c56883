"""Boundary Protocols — contracts between route handlers and persistence.

Invariants:
    - Routes depend on ProducerRepository, never on a concrete store
    - Every method maps to exactly one SQL statement
    - update/delete return None when no row matched (not an error)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any object with
      the same async methods
"""

from typing import Protocol

from producer_registry.schemas.producer import (
    DashboardStats, ProducerIn, ProducerOut,
)


class ProducerRepository(Protocol):
    """Contract for producer persistence — implemented by the store."""
    async def list_all(self) -> list[ProducerOut]: ...
    async def create(self, producer: ProducerIn) -> ProducerOut: ...
    async def update(
        self, producer_id: int, producer: ProducerIn,
    ) -> ProducerOut | None: ...
    async def delete(self, producer_id: int) -> ProducerOut | None: ...
    async def aggregate(self) -> DashboardStats: ...
