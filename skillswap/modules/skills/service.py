from supabase import Client
from skillswap.modules.skills.schemas import SkillCreate, SkillResponse
from typing import Dict, List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class SkillService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_skills(self, user_id: str, skill_type: Optional[str] = None) -> List[SkillResponse]:
        """List a user's skills, optionally only one skill_type"""
        try:
            query = self.supabase.table("skills").select("*").eq("user_id", user_id)
            if skill_type:
                query = query.eq("skill_type", skill_type)
            result = query.order("created_at").execute()
            return [SkillResponse(**skill) for skill in result.data or []]
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching skills for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load skills. Please try again.")

    def list_skills_for_users(self, user_ids: List[str]) -> Dict[str, List[SkillResponse]]:
        """Fetch skills of many users in one query, grouped by user_id"""
        grouped: Dict[str, List[SkillResponse]] = {user_id: [] for user_id in user_ids}
        if not user_ids:
            return grouped
        result = self.supabase.table("skills")\
            .select("*")\
            .in_("user_id", user_ids)\
            .order("created_at")\
            .execute()
        for skill in result.data or []:
            grouped.setdefault(skill["user_id"], []).append(SkillResponse(**skill))
        return grouped

    def get_skills_by_ids(self, skill_ids: List[str]) -> Dict[str, dict]:
        """Return raw skill rows keyed by id"""
        if not skill_ids:
            return {}
        result = self.supabase.table("skills")\
            .select("id, user_id, skill_name, experience_level, skill_type")\
            .in_("id", list(set(skill_ids)))\
            .execute()
        return {skill["id"]: skill for skill in result.data or []}

    def add_skill(self, user_id: str, skill_data: SkillCreate) -> SkillResponse:
        """Add a skill unless the user already lists it under the same type"""
        try:
            existing = self.supabase.table("skills")\
                .select("id, skill_name")\
                .eq("user_id", user_id)\
                .eq("skill_type", skill_data.skill_type)\
                .execute()
            wanted_name = skill_data.skill_name.lower()
            if any((s.get("skill_name") or "").strip().lower() == wanted_name for s in existing.data or []):
                raise HTTPException(status_code=400, detail="You already have this skill in your profile.")

            result = self.supabase.table("skills").insert({
                "user_id": user_id,
                "skill_name": skill_data.skill_name,
                "description": skill_data.description,
                "experience_level": skill_data.experience_level,
                "skill_type": skill_data.skill_type,
                "is_priority": skill_data.is_priority,
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to add skill. Please try again.")

            logger.info(f"User {user_id} added {skill_data.skill_type} skill {skill_data.skill_name!r}")
            return SkillResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error adding skill: {e}")
            raise HTTPException(status_code=500, detail="Failed to add skill. Please try again.")

    def delete_skill(self, user_id: str, skill_id: str) -> bool:
        """Delete one of the user's own skills"""
        try:
            result = self.supabase.table("skills")\
                .delete()\
                .eq("id", skill_id)\
                .eq("user_id", user_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Skill not found")

            return True
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error deleting skill {skill_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to remove skill. Please try again.")
