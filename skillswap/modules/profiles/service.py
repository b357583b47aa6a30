from supabase import Client
from skillswap.modules.profiles.schemas import (
    ProfileUpsert, ProfileResponse, ProfileWithSkillsResponse, MyProfileResponse,
    ProfileSummary
)
from skillswap.modules.skills.service import SkillService
from skillswap.modules.availability.service import AvailabilityService
from typing import Dict, List, Optional
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.skills = SkillService(supabase)
        self.availability = AvailabilityService(supabase)

    def get_profile(self, user_id: str) -> Optional[ProfileResponse]:
        """Get a profile by user_id. A user without a profile yet is not an error."""
        result = self.supabase.table("profiles")\
            .select("*")\
            .eq("user_id", user_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            return None
        return ProfileResponse(**result.data)

    def get_my_profile(self, user_id: str) -> MyProfileResponse:
        """Own profile with skills and availability"""
        try:
            profile = self.get_profile(user_id)
            if profile is None:
                raise HTTPException(status_code=404, detail="Profile not found")

            return MyProfileResponse(
                **profile.model_dump(),
                skills=self.skills.list_skills(user_id),
                availability=self.availability.find_availability(user_id),
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching profile for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load profile. Please try again.")

    def get_visible_profile(self, user_id: str, viewer_id: str) -> ProfileWithSkillsResponse:
        """Profile with skills, if public or the viewer's own"""
        try:
            profile = self.get_profile(user_id)
            if profile is None or (not profile.is_public and user_id != viewer_id):
                raise HTTPException(status_code=404, detail="Profile not found")

            return ProfileWithSkillsResponse(
                **profile.model_dump(),
                skills=self.skills.list_skills(user_id),
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching profile for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load profile. Please try again.")

    def get_profile_summaries(self, user_ids: List[str]) -> Dict[str, ProfileSummary]:
        """Name, location and photo of many users keyed by user_id"""
        if not user_ids:
            return {}
        result = self.supabase.table("profiles")\
            .select("user_id, full_name, location, profile_photo")\
            .in_("user_id", list(set(user_ids)))\
            .execute()
        return {
            row["user_id"]: ProfileSummary(
                full_name=row.get("full_name") or "",
                location=row.get("location"),
                profile_photo=row.get("profile_photo"),
            )
            for row in result.data or []
        }

    def upsert_profile(self, user_id: str, profile_data: ProfileUpsert) -> ProfileResponse:
        """Create or update the user's profile. Requires at least one offering skill."""
        try:
            offering = self.skills.list_skills(user_id, skill_type="offering")
            if not offering:
                raise HTTPException(
                    status_code=400,
                    detail="Please add at least one skill you can offer to others. "
                           "This helps other users know what you can teach."
                )

            update_data = {
                "user_id": user_id,
                "full_name": profile_data.full_name,
                "location": profile_data.location,
                "bio": profile_data.bio,
                "is_public": profile_data.is_public,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }
            # Keep an uploaded photo unless a new URL is given
            if profile_data.profile_photo is not None:
                update_data["profile_photo"] = profile_data.profile_photo

            result = self.supabase.table("profiles")\
                .upsert(update_data, on_conflict="user_id")\
                .execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to save profile. Please try again.")

            logger.info(f"Saved profile for {user_id}")
            return ProfileResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error upserting profile: {e}")
            raise HTTPException(status_code=500, detail="Failed to save profile. Please try again.")
