from supabase import Client
from skillswap.modules.stats.schemas import CommunityStats
from skillswap.modules.swap_requests.transitions import COMPLETED
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

SATISFIED_RATING = 4


class StatsService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_community_stats(self) -> CommunityStats:
        """Landing page numbers: members, completed swaps, satisfaction, distinct skills"""
        try:
            members = self.supabase.table("profiles")\
                .select("user_id", count="exact")\
                .eq("is_public", True)\
                .execute()
            swaps = self.supabase.table("swap_requests")\
                .select("id", count="exact")\
                .eq("status", COMPLETED)\
                .execute()
            ratings = self.supabase.table("feedback").select("rating").execute().data or []
            skill_names = self.supabase.table("skills").select("skill_name").execute().data or []

            satisfaction = None
            if ratings:
                satisfied = sum(1 for r in ratings if (r.get("rating") or 0) >= SATISFIED_RATING)
                satisfaction = round(100 * satisfied / len(ratings))

            return CommunityStats(
                active_members=members.count or 0,
                skills_exchanged=swaps.count or 0,
                satisfaction_rate=satisfaction,
                skill_categories=len({s["skill_name"] for s in skill_names if s.get("skill_name")}),
            )
        except Exception as e:
            logger.error(f"Error fetching community stats: {e}")
            raise HTTPException(status_code=500, detail="Failed to load stats")
