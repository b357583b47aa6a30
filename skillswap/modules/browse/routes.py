from fastapi import APIRouter, Depends
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.profiles.schemas import ProfileWithSkillsResponse
from skillswap.modules.skills.schemas import ExperienceLevel
from skillswap.modules.browse.service import BrowseService
from skillswap.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/browse", tags=["browse"])


def get_browse_service(supabase: Client = Depends(get_supabase)) -> BrowseService:
    return BrowseService(supabase)


@router.get("", response_model=List[ProfileWithSkillsResponse])
async def browse_profiles(
    search: Optional[str] = None,
    location: Optional[str] = None,
    experience_level: Optional[ExperienceLevel] = None,
    user_data: Dict = Depends(get_current_user_id),
    service: BrowseService = Depends(get_browse_service)
):
    """Browse other users' public profiles by name, location, skill or experience level"""
    return service.browse(
        user_data["id"],
        search=search,
        location=location,
        experience_level=experience_level,
    )
