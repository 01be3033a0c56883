"""Producer Routes — list, create, replace and delete producers.

Invariants:
    - Request bodies validated by ProducerIn before the handler runs; failures never
      reach the store
    - When ENFORCE_AREA_RULE is on, the area breakdown is checked before the store too
    - PUT/DELETE on a missing id return 200 with a null body unless
      MISSING_PRODUCER_AS_404 is on
    - Handlers hold no state between requests

Design Decisions:
    - Store obtained through get_producer_store so tests can override persistence
      without touching the session dependency
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from producer_registry.config import Settings, get_settings
from producer_registry.core.area_rules import check_area_breakdown
from producer_registry.core.errors import (
    AreaRuleViolationError, ErrorContext, ResourceNotFoundError,
)
from producer_registry.core.repository_protocols import ProducerRepository
from producer_registry.infrastructure.database import get_db
from producer_registry.schemas.producer import ProducerIn, ProducerOut
from producer_registry.services.producer_store import ProducerStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/producers", tags=["producers"])


def get_producer_store(db: AsyncSession = Depends(get_db)) -> ProducerRepository:
    return ProducerStore(db)


def ensure_area_rule(
    producer: ProducerIn, settings: Settings, producer_id: int | None = None,
) -> None:
    """Raise AreaRuleViolationError when the rule is enabled and broken."""
    if not settings.enforce_area_rule:
        return
    failures = check_area_breakdown(
        producer.total_area, producer.cultivable_area, producer.vegetation_area,
    )
    if failures:
        raise AreaRuleViolationError(
            failures, ErrorContext(producer_id=producer_id),
        )


def ensure_found(
    producer: ProducerOut | None, producer_id: int, settings: Settings,
) -> ProducerOut | None:
    if producer is None and settings.missing_producer_as_404:
        raise ResourceNotFoundError(
            "Producer", str(producer_id), ErrorContext(producer_id=producer_id),
        )
    return producer


@router.get("", response_model=list[ProducerOut])
async def list_producers(
    store: ProducerRepository = Depends(get_producer_store),
):
    """List every producer."""
    return await store.list_all()


@router.post("", response_model=ProducerOut)
async def create_producer(
    body: ProducerIn,
    store: ProducerRepository = Depends(get_producer_store),
    settings: Settings = Depends(get_settings),
):
    """Validate then insert a producer."""
    ensure_area_rule(body, settings)
    return await store.create(body)


@router.put("/{producer_id}", response_model=ProducerOut | None)
async def replace_producer(
    producer_id: int,
    body: ProducerIn,
    store: ProducerRepository = Depends(get_producer_store),
    settings: Settings = Depends(get_settings),
):
    """Validate then replace every field of a producer."""
    ensure_area_rule(body, settings, producer_id)
    updated = await store.update(producer_id, body)
    return ensure_found(updated, producer_id, settings)


@router.delete("/{producer_id}", response_model=ProducerOut | None)
async def delete_producer(
    producer_id: int,
    store: ProducerRepository = Depends(get_producer_store),
    settings: Settings = Depends(get_settings),
):
    """Delete a producer and return the removed row."""
    deleted = await store.delete(producer_id)
    return ensure_found(deleted, producer_id, settings)
