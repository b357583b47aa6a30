from supabase import Client
from skillswap.modules.profiles.schemas import ProfileWithSkillsResponse
from skillswap.modules.skills.service import SkillService
from typing import List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def filter_profiles(
    profiles: List[ProfileWithSkillsResponse],
    search: Optional[str] = None,
    location: Optional[str] = None,
    experience_level: Optional[str] = None
) -> List[ProfileWithSkillsResponse]:
    """Narrow browse results.

    search matches name, location or any skill name; location matches the
    location; experience_level keeps profiles with at least one skill at that
    level. Text matching is case-insensitive substring matching.
    """
    filtered = profiles

    if search:
        term = search.strip().lower()
        filtered = [
            p for p in filtered
            if term in p.full_name.lower()
            or term in (p.location or "").lower()
            or any(term in s.skill_name.lower() for s in p.skills)
        ]

    if location:
        place = location.strip().lower()
        filtered = [p for p in filtered if place in (p.location or "").lower()]

    if experience_level:
        filtered = [
            p for p in filtered
            if any(s.experience_level == experience_level for s in p.skills)
        ]

    return filtered


class BrowseService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.skills = SkillService(supabase)

    def list_public_profiles(self, exclude_user_id: Optional[str] = None) -> List[ProfileWithSkillsResponse]:
        """All public profiles except the viewer's, each with its skills"""
        try:
            query = self.supabase.table("profiles").select("*").eq("is_public", True)
            if exclude_user_id:
                query = query.neq("user_id", exclude_user_id)
            result = query.order("created_at", desc=True).execute()
            profiles = result.data or []

            skills_by_user = self.skills.list_skills_for_users([p["user_id"] for p in profiles])
            return [
                ProfileWithSkillsResponse(**profile, skills=skills_by_user.get(profile["user_id"], []))
                for profile in profiles
            ]
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching users: {e}")
            raise HTTPException(status_code=500, detail="Failed to load users. Please try again.")

    def browse(
        self,
        viewer_id: str,
        search: Optional[str] = None,
        location: Optional[str] = None,
        experience_level: Optional[str] = None
    ) -> List[ProfileWithSkillsResponse]:
        profiles = self.list_public_profiles(exclude_user_id=viewer_id)
        return filter_profiles(profiles, search=search, location=location, experience_level=experience_level)
