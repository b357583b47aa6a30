from fastapi import APIRouter, Depends
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.stats.schemas import CommunityStats
from skillswap.modules.stats.service import StatsService
from supabase import Client

router = APIRouter(prefix="/stats", tags=["stats"])


def get_stats_service(supabase: Client = Depends(get_supabase)) -> StatsService:
    return StatsService(supabase)


@router.get("", response_model=CommunityStats)
async def get_community_stats(service: StatsService = Depends(get_stats_service)):
    """Public community numbers for the landing page"""
    return service.get_community_stats()
