"""Dashboard Route — aggregate counters across all producers.

Invariants:
    - Computed on demand with a single SELECT, nothing cached
    - Empty table yields totalFarms == 0 and totalArea == 0
"""

from fastapi import APIRouter, Depends

from producer_registry.api.routes.producers import get_producer_store
from producer_registry.core.repository_protocols import ProducerRepository
from producer_registry.schemas.producer import DashboardStats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStats)
async def get_dashboard(
    store: ProducerRepository = Depends(get_producer_store),
):
    """Farm count and summed total area."""
    return await store.aggregate()
