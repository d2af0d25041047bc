"""
Admin dashboard statistics router.
"""
from fastapi import APIRouter, Depends

from app.database.connections import get_store
from app.dependencies.roles import require_admin
from app.schemas.user import StatsResponse
from app.services.stats_service import StatsService

router = APIRouter(prefix="/api/stats", tags=["Admin"])


async def get_stats_service() -> StatsService:
    store = await get_store()
    return StatsService(store)


@router.get(
    "",
    response_model=StatsResponse,
    dependencies=[Depends(require_admin())],
    summary="Dashboard counters",
)
async def get_stats(
    stats_service: StatsService = Depends(get_stats_service),
):
    """Member, event, gallery and unread message counts. Admin only."""
    return await stats_service.get_stats()
